"""Type definitions and errors for the graph library."""
from typing import Hashable, Iterator, List, Optional, TypedDict, Union
from dataclasses import dataclass, field


Node = Hashable
EdgeWeight = Union[int, float]

# Weight reported for edges that were never given one.
DEFAULT_EDGE_WEIGHT: EdgeWeight = 1


class _LinkRequired(TypedDict):
    source: Node
    target: Node


class LinkRecord(_LinkRequired, total=False):
    """Serialized edge. `weight` is optional on input."""
    weight: EdgeWeight


class NodeRecord(TypedDict):
    """Serialized node."""
    id: Node


class SerializedGraph(TypedDict):
    """Flat node/link list representation of a graph."""
    nodes: List[NodeRecord]
    links: List[LinkRecord]


@dataclass
class Traversal:
    """Outcome of a depth-first search.

    `cycle` is set when cycle checking was requested and a node still on the
    active path was reached again; `cycle_node` is that node. The orders then
    hold whatever had been visited before the traversal stopped.
    """
    preorder: List[Node] = field(default_factory=list)
    postorder: List[Node] = field(default_factory=list)
    cycle: bool = False
    cycle_node: Optional[Node] = None


@dataclass
class Path:
    """Shortest path result: nodes from source to target and total weight."""
    nodes: List[Node]
    weight: EdgeWeight = 0

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __getitem__(self, index: int) -> Node:
        return self.nodes[index]


# Errors
class GraphError(Exception):
    """Base error for graph operations."""


class CycleError(GraphError):
    """Cycle found where an acyclic graph was required."""

    def __init__(self, node: Node):
        super().__init__(f"Cycle found at node {node!r}")
        self.node = node


class NodeNotFoundError(GraphError):
    """Node is not in the graph."""

    def __init__(self, message: str, node: Node):
        super().__init__(message)
        self.node = node


class SourceNotInGraphError(NodeNotFoundError):
    """Source node of a path query is not in the graph."""

    def __init__(self, node: Node):
        super().__init__("Source node is not in the graph", node)


class TargetNotInGraphError(NodeNotFoundError):
    """Destination node of a path query is not in the graph."""

    def __init__(self, node: Node):
        super().__init__("Destination node is not in the graph", node)


class NoPathError(GraphError):
    """Target is not reachable from source."""

    def __init__(self, source: Node, target: Node):
        super().__init__(f"No path found from {source!r} to {target!r}")
        self.source = source
        self.target = target
