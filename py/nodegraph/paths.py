"""Dijkstra's shortest path algorithm.

Cormen et al. "Introduction to Algorithms", 3rd Ed., p. 658. Edge weights
are assumed non-negative; this is not checked.
"""
import heapq
import itertools
import logging
from typing import Dict

from .graph import Graph
from .types import (
    EdgeWeight, NoPathError, Node, Path, SourceNotInGraphError,
    TargetNotInGraphError
)

logger = logging.getLogger(__name__)


def shortest_path(graph: Graph, source: Node, target: Node) -> Path:
    """Find the lowest-weight path from `source` to `target`.

    Raises SourceNotInGraphError / TargetNotInGraphError when an endpoint is
    not in the graph, and NoPathError when `target` cannot be reached.
    Among equally short paths, which one is returned is unspecified.
    """
    # Upper bounds for shortest path weights from source.
    dist: Dict[Node, EdgeWeight] = {node: float("inf") for node in graph.nodes}
    if source not in dist:
        raise SourceNotInGraphError(source)
    if target not in dist:
        raise TargetNotInGraphError(target)
    dist[source] = 0

    # Predecessors.
    parent: Dict[Node, Node] = {}
    settled = set()
    # The counter keeps nodes themselves out of heap comparisons.
    counter = itertools.count()
    heap = [(0, next(counter), source)]

    while heap:
        d, _, node = heapq.heappop(heap)
        if node in settled:
            continue
        settled.add(node)

        for neighbor in graph.iter_adjacent(node):
            new_dist = d + graph.get_edge_weight(node, neighbor)
            if new_dist < dist[neighbor]:
                dist[neighbor] = new_dist
                parent[neighbor] = node
                heapq.heappush(heap, (new_dist, next(counter), neighbor))

    # Walk the predecessor subgraph back from the target.
    nodes = [target]
    weight: EdgeWeight = 0
    current = target
    while current in parent:
        previous = parent[current]
        weight += graph.get_edge_weight(previous, current)
        nodes.append(previous)
        current = previous

    if current != source:
        raise NoPathError(source, target)

    nodes.reverse()
    logger.debug(f"Shortest path {source!r} -> {target!r}: {len(nodes)} nodes, weight {weight}")
    return Path(nodes=nodes, weight=weight)
