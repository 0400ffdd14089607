"""In-memory directed and undirected graph library - public API."""
from .types import (
    Node, EdgeWeight, DEFAULT_EDGE_WEIGHT,
    NodeRecord, LinkRecord, SerializedGraph, Traversal, Path,
    GraphError, CycleError, NodeNotFoundError, SourceNotInGraphError,
    TargetNotInGraphError, NoPathError,
)
from .graph import Graph
from .traversal import depth_first_search, has_cycle, topological_sort
from .paths import shortest_path
from .ancestors import lowest_common_ancestors
from .serialization import serialize, deserialize, to_json, from_json
from .components import UndirectedGraph, find_components

__version__ = "1.0.0"

__all__ = [
    # Types
    "Node", "EdgeWeight", "DEFAULT_EDGE_WEIGHT",
    "NodeRecord", "LinkRecord", "SerializedGraph", "Traversal", "Path",
    "GraphError", "CycleError", "NodeNotFoundError", "SourceNotInGraphError",
    "TargetNotInGraphError", "NoPathError",
    # Graphs
    "Graph", "UndirectedGraph",
    # Algorithms
    "depth_first_search", "has_cycle", "topological_sort",
    "shortest_path", "lowest_common_ancestors", "find_components",
    # Serialization
    "serialize", "deserialize", "to_json", "from_json",
]
