"""Graph creation, modification and elementary queries."""
import logging
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .types import (
    DEFAULT_EDGE_WEIGHT, EdgeWeight, Node, Path, SerializedGraph, Traversal
)

logger = logging.getLogger(__name__)


class Graph:
    """Directed multigraph over hashable nodes, stored as adjacency lists.

    Inserting an edge twice keeps both occurrences. Edge weights are kept in
    a separate mapping keyed by (source, target); pairs without an entry
    weigh DEFAULT_EDGE_WEIGHT.

    None of the mutation or query methods raise for unknown nodes or edges.
    """

    def __init__(self, serialized: Optional[SerializedGraph] = None):
        # Keys are nodes, values are adjacent node lists in insertion order.
        self._edges: Dict[Node, List[Node]] = {}
        self._edge_weights: Dict[Tuple[Node, Node], EdgeWeight] = {}

        if serialized is not None:
            self.deserialize(serialized)

    def __len__(self) -> int:
        return len(self._edges)

    def __contains__(self, node: Node) -> bool:
        return node in self._edges

    def __iter__(self) -> Iterator[Node]:
        return iter(self._edges)

    def __repr__(self) -> str:
        edge_count = sum(len(targets) for targets in self._edges.values())
        return f"{type(self).__name__}(nodes={len(self)}, edges={edge_count})"

    # -----------------
    # NODE OPERATIONS
    # -----------------

    @property
    def nodes(self) -> List[Node]:
        """All nodes, in order of first appearance."""
        # dict keys double as an ordered set
        seen: Dict[Node, None] = {}
        for source, targets in self._edges.items():
            seen[source] = None
            for target in targets:
                seen[target] = None
        return list(seen)

    @property
    def entry_nodes(self) -> List[Node]:
        """Nodes without incoming edges."""
        targets = {target for adjacent in self._edges.values() for target in adjacent}
        return [node for node in self._edges if node not in targets]

    @property
    def exit_nodes(self) -> List[Node]:
        """Nodes without outgoing edges."""
        return [node for node, adjacent in self._edges.items() if not adjacent]

    def add_node(self, node: Node) -> "Graph":
        """Add a node. Does nothing if the node is already present."""
        self._edges.setdefault(node, [])
        return self

    def remove_node(self, node: Node) -> "Graph":
        """Remove a node together with its incoming and outgoing edges."""
        for source, targets in self._edges.items():
            if node in targets:
                self._edges[source] = [target for target in targets if target != node]

        self._edges.pop(node, None)
        return self

    def has_node(self, node: Node) -> bool:
        # add_edge makes every target a key as well
        return node in self._edges

    # -----------------
    # EDGE OPERATIONS
    # -----------------

    def add_edge(self, source: Node, target: Node,
                 weight: Optional[EdgeWeight] = None) -> "Graph":
        """Add an edge, creating both endpoints if needed."""
        self.add_node(source)
        self.add_node(target)
        self._edges[source].append(target)

        if weight is not None:
            self.set_edge_weight(source, target, weight)
        return self

    def remove_edge(self, source: Node, target: Node) -> "Graph":
        """Remove every source -> target edge. Both nodes are kept."""
        if source in self._edges:
            self._edges[source] = [
                node for node in self._edges[source] if node != target
            ]
        return self

    def has_edge(self, source: Node, target: Node) -> bool:
        return target in self._edges.get(source, ())

    def set_edge_weight(self, source: Node, target: Node,
                        weight: EdgeWeight) -> "Graph":
        self._edge_weights[(source, target)] = weight
        return self

    def get_edge_weight(self, source: Node, target: Node) -> EdgeWeight:
        return self._edge_weights.get((source, target), DEFAULT_EDGE_WEIGHT)

    # -----------------
    # ADJACENCY QUERIES
    # -----------------

    def adjacent(self, node: Node) -> List[Node]:
        """Copy of the adjacency list of `node`; empty for unknown nodes."""
        return list(self._edges.get(node, ()))

    def iter_adjacent(self, node: Node) -> Iterator[Node]:
        """Iterate the adjacency list of `node` without copying it."""
        return iter(self._edges.get(node, ()))

    def inbound(self, node: Node) -> List[Node]:
        """Distinct nodes with an edge into `node`. Costs O(E)."""
        return [source for source, targets in self._edges.items() if node in targets]

    def outbound(self, node: Node) -> List[Node]:
        """Targets of the edges leaving `node`."""
        return self.adjacent(node)

    def copy(self) -> "Graph":
        """Independent graph with the same adjacency and weights."""
        clone = type(self)()
        clone._edges = {node: list(targets) for node, targets in self._edges.items()}
        clone._edge_weights = dict(self._edge_weights)
        return clone

    # -----------------
    # ALGORITHMS
    # -----------------
    # Imported here to avoid circular imports.

    def depth_first_search(self, source_nodes: Optional[Iterable[Node]] = None,
                           include_source_nodes: bool = True,
                           error_on_cycle: bool = False) -> Traversal:
        from .traversal import depth_first_search
        return depth_first_search(self, source_nodes, include_source_nodes, error_on_cycle)

    def has_cycle(self) -> bool:
        from .traversal import has_cycle
        return has_cycle(self)

    def topological_sort(self, source_nodes: Optional[Iterable[Node]] = None,
                         include_source_nodes: bool = True) -> List[Node]:
        from .traversal import topological_sort
        return topological_sort(self, source_nodes, include_source_nodes)

    def shortest_path(self, source: Node, target: Node) -> Path:
        from .paths import shortest_path
        return shortest_path(self, source, target)

    def lowest_common_ancestors(self, node1: Node, node2: Node) -> List[Node]:
        from .ancestors import lowest_common_ancestors
        return lowest_common_ancestors(self, node1, node2)

    def serialize(self) -> SerializedGraph:
        from .serialization import serialize
        return serialize(self)

    def deserialize(self, serialized: SerializedGraph) -> "Graph":
        from .serialization import deserialize
        return deserialize(serialized, self)
