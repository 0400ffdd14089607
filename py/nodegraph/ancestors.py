"""Lowest common ancestors.

Adapted from the breadth-first approach in
https://github.com/relaxedws/lca/blob/master/src/LowestCommonAncestor.php,
searching depth-first instead. Here an "ancestor" of a node is anything
reachable from it along outgoing edges, not a predecessor.
"""
import logging
from typing import Dict, List

from .graph import Graph
from .types import Node

logger = logging.getLogger(__name__)


def _reachable_until(graph: Graph, start: Node, stop: Node) -> Dict[Node, None]:
    """Nodes reachable from `start` in visitation order, up to `stop`."""
    seen: Dict[Node, None] = {}
    stack = [start]
    while stack:
        node = stack.pop()
        if node in seen:
            continue
        seen[node] = None
        if node == stop:
            break
        stack.extend(reversed(graph.adjacent(node)))
    return seen


def lowest_common_ancestors(graph: Graph, node1: Node, node2: Node) -> List[Node]:
    """Common ancestors of `node1` and `node2` closest to `node2`.

    If `node2` is reachable from `node1` it is the only answer. Otherwise
    the search from `node2` stops expanding as soon as one common node is
    found, so the result holds the first common nodes met rather than a
    globally minimal set. Returns an empty list if nothing is shared.
    """
    node1_ancestors = _reachable_until(graph, node1, node2)
    if node2 in node1_ancestors:
        return [node2]

    lcas: List[Node] = []
    visited = set()
    stack = [node2]
    while stack:
        node = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        if node in node1_ancestors:
            lcas.append(node)
        elif not lcas:
            stack.extend(reversed(graph.adjacent(node)))

    logger.debug(f"Common ancestors of {node1!r} and {node2!r}: {lcas}")
    return lcas
