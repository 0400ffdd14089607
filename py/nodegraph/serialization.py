"""Conversion between graphs and the flat node/link list representation."""
import json
import logging
from typing import Any, Optional

from .graph import Graph
from .types import LinkRecord, SerializedGraph

logger = logging.getLogger(__name__)


def serialize(graph: Graph) -> SerializedGraph:
    """Convert a graph to {"nodes": [...], "links": [...]}.

    Every adjacency occurrence becomes one link carrying its effective
    weight, so parallel edges are kept.
    """
    serialized: SerializedGraph = {
        "nodes": [{"id": node} for node in graph.nodes],
        "links": [],
    }

    for record in serialized["nodes"]:
        source = record["id"]
        for target in graph.iter_adjacent(source):
            link: LinkRecord = {
                "source": source,
                "target": target,
                "weight": graph.get_edge_weight(source, target),
            }
            serialized["links"].append(link)

    return serialized


def deserialize(serialized: SerializedGraph, graph: Optional[Graph] = None) -> Graph:
    """Add the nodes and links of `serialized` to `graph` (a new one if None)."""
    if graph is None:
        graph = Graph()

    # Nodes first, so that isolated nodes survive. Links are added as stored,
    # without mirroring: an undirected graph already lists both directions.
    for record in serialized["nodes"]:
        graph.add_node(record["id"])
    for link in serialized["links"]:
        Graph.add_edge(graph, link["source"], link["target"], link.get("weight"))

    logger.debug(
        f"Deserialized {len(serialized['nodes'])} nodes and "
        f"{len(serialized['links'])} links into {graph!r}"
    )
    return graph


def to_json(graph: Graph, **kwargs: Any) -> str:
    """Serialize a graph to JSON text. Extra arguments go to json.dumps."""
    return json.dumps(graph.serialize(), **kwargs)


def from_json(text: str, graph: Optional[Graph] = None) -> Graph:
    """Build a graph from JSON produced by to_json."""
    data = json.loads(text)
    if graph is None:
        graph = Graph()
    return graph.deserialize(data)
