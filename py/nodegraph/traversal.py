"""Depth-first search, cycle detection and topological sort.

Depth-first search follows Cormen et al. "Introduction to Algorithms",
3rd Ed., p. 604; the topological sort is the reversed finishing order
(p. 613). Both run on an explicit stack so deep graphs do not hit the
recursion limit.
"""
import logging
from typing import Iterable, List, Optional, Set

from .graph import Graph
from .types import CycleError, Node, Traversal

logger = logging.getLogger(__name__)


def depth_first_search(graph: Graph, source_nodes: Optional[Iterable[Node]] = None,
                       include_source_nodes: bool = True,
                       error_on_cycle: bool = False) -> Traversal:
    """Depth-first traversal from `source_nodes` (all nodes by default).

    With `include_source_nodes` false the sources are marked visited up
    front, so only nodes reachable from them (and distinct from them) are
    reported. With `error_on_cycle` the traversal stops at the first back
    edge and the result is flagged with `cycle`.
    """
    sources = graph.nodes if source_nodes is None else list(source_nodes)

    result = Traversal()
    visited: Set[Node] = set()
    visiting: Set[Node] = set()

    def discover(node: Node, stack: list) -> None:
        visited.add(node)
        visiting.add(node)
        result.preorder.append(node)
        stack.append((node, graph.iter_adjacent(node)))

    def visit(start: Node) -> bool:
        """Visit everything reachable from `start`. False on a cycle."""
        if error_on_cycle and start in visiting:
            result.cycle, result.cycle_node = True, start
            return False
        if start in visited:
            return True

        stack: list = []
        discover(start, stack)
        while stack:
            node, neighbors = stack[-1]
            for neighbor in neighbors:
                if error_on_cycle and neighbor in visiting:
                    result.cycle, result.cycle_node = True, neighbor
                    return False
                if neighbor not in visited:
                    discover(neighbor, stack)
                    break
            else:
                stack.pop()
                visiting.discard(node)
                result.postorder.append(node)
        return True

    if include_source_nodes:
        starts = sources
    else:
        visited.update(sources)
        starts = [neighbor for node in sources for neighbor in graph.iter_adjacent(node)]

    for start in starts:
        if not visit(start):
            logger.debug(f"Cycle detected at node {result.cycle_node!r}")
            break

    return result


def has_cycle(graph: Graph) -> bool:
    """Check if the graph contains any cycle."""
    return depth_first_search(graph, error_on_cycle=True).cycle


def topological_sort(graph: Graph, source_nodes: Optional[Iterable[Node]] = None,
                     include_source_nodes: bool = True) -> List[Node]:
    """Order the traversed nodes so that for each edge (u, v), u precedes v.

    Raises CycleError if the traversed subgraph contains a cycle.
    """
    traversal = depth_first_search(graph, source_nodes, include_source_nodes,
                                   error_on_cycle=True)
    if traversal.cycle:
        raise CycleError(traversal.cycle_node)

    traversal.postorder.reverse()
    return traversal.postorder
