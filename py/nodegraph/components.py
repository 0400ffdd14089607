"""Undirected graphs and connected components."""
import logging
from typing import List, Optional, Set

from .graph import Graph
from .traversal import depth_first_search
from .types import EdgeWeight, Node

logger = logging.getLogger(__name__)


class UndirectedGraph(Graph):
    """Graph whose edges are stored in both directions.

    A self-loop is stored once.
    """

    def add_edge(self, source: Node, target: Node,
                 weight: Optional[EdgeWeight] = None) -> "UndirectedGraph":
        super().add_edge(source, target, weight)
        if source != target:
            super().add_edge(target, source, weight)
        return self

    def remove_edge(self, source: Node, target: Node) -> "UndirectedGraph":
        super().remove_edge(source, target)
        super().remove_edge(target, source)
        return self

    def set_edge_weight(self, source: Node, target: Node,
                        weight: EdgeWeight) -> "UndirectedGraph":
        super().set_edge_weight(source, target, weight)
        super().set_edge_weight(target, source, weight)
        return self

    def find_components(self) -> List[List[Node]]:
        return find_components(self)


def find_components(graph: Graph) -> List[List[Node]]:
    """Group nodes into connected components.

    Components come in order of their first node; members are listed in
    depth-first discovery order. Meant for UndirectedGraph, where following
    outgoing edges reaches the whole component.
    """
    components: List[List[Node]] = []
    assigned: Set[Node] = set()

    for node in graph.nodes:
        if node in assigned:
            continue
        component = depth_first_search(graph, [node]).preorder
        assigned.update(component)
        components.append(component)

    logger.debug(f"Found {len(components)} components")
    return components
