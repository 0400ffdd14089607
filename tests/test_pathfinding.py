"""Tests for Dijkstra shortest paths."""
import pytest

from nodegraph import (
    GraphError, NodeNotFoundError, NoPathError, Path, SourceNotInGraphError,
    TargetNotInGraphError, shortest_path
)


class TestShortestPath:
    """Tests for shortest_path."""

    def test_single_edge(self, graph):
        """A single edge is its own shortest path."""
        graph.add_edge("a", "b")
        assert shortest_path(graph, "a", "b") == Path(["a", "b"], 1)

    def test_two_edges(self, graph):
        """Unweighted edges count 1 each."""
        graph.add_edge("a", "b").add_edge("b", "c")
        assert shortest_path(graph, "a", "c") == Path(["a", "b", "c"], 2)

    def test_cormen_to_z(self, cormen_graph):
        """s -> z goes through y."""
        path = cormen_graph.shortest_path("s", "z")
        assert path.nodes == ["s", "y", "z"]
        assert path.weight == 7

    def test_cormen_to_x(self, cormen_graph):
        """s -> x detours through y and t."""
        path = cormen_graph.shortest_path("s", "x")
        assert path.nodes == ["s", "y", "t", "x"]
        assert path.weight == 9

    def test_weight_is_sum_of_edges(self, cormen_graph):
        """The reported weight matches the edges along the path."""
        path = cormen_graph.shortest_path("s", "t")
        total = sum(
            cormen_graph.get_edge_weight(u, v)
            for u, v in zip(path.nodes, path.nodes[1:])
        )
        assert path.weight == total == 8

    def test_weighted_detour_beats_direct_edge(self, graph):
        """A longer chain wins when it is lighter."""
        graph.add_edge("a", "d", 10)
        graph.add_edge("a", "b", 1).add_edge("b", "c", 1).add_edge("c", "d", 1)
        assert shortest_path(graph, "a", "d") == Path(["a", "b", "c", "d"], 3)

    def test_same_node(self, graph):
        """A node reaches itself with weight 0."""
        graph.add_edge("a", "b")
        assert shortest_path(graph, "a", "a") == Path(["a"], 0)

    def test_path_behaves_like_a_sequence(self, graph):
        """Path supports len, iteration and indexing."""
        graph.add_edge("a", "b").add_edge("b", "c")
        path = shortest_path(graph, "a", "c")
        assert len(path) == 3
        assert list(path) == ["a", "b", "c"]
        assert path[-1] == "c"

    def test_source_not_in_graph(self, graph):
        """Unknown sources raise SourceNotInGraphError."""
        graph.add_edge("a", "b")
        with pytest.raises(SourceNotInGraphError, match="Source node") as excinfo:
            shortest_path(graph, "z", "b")
        assert excinfo.value.node == "z"

    def test_target_not_in_graph(self, graph):
        """Unknown targets raise TargetNotInGraphError."""
        graph.add_edge("a", "b")
        with pytest.raises(TargetNotInGraphError, match="Destination node"):
            shortest_path(graph, "b", "g")

    def test_missing_nodes_share_a_base_class(self, graph):
        """Both endpoint errors are NodeNotFoundError."""
        with pytest.raises(NodeNotFoundError):
            shortest_path(graph, "a", "b")

    def test_no_path(self, graph):
        """Unreachable targets raise NoPathError."""
        graph.add_edge("a", "b").add_edge("d", "e")
        with pytest.raises(NoPathError, match="No path") as excinfo:
            shortest_path(graph, "a", "e")
        assert isinstance(excinfo.value, GraphError)
        assert (excinfo.value.source, excinfo.value.target) == ("a", "e")

    def test_against_edge_direction(self, graph):
        """Edges are only followed forwards."""
        graph.add_edge("a", "b")
        with pytest.raises(NoPathError):
            shortest_path(graph, "b", "a")

    def test_disconnected_subgraph(self, graph):
        """Unrelated components do not disturb the search."""
        graph.add_edge("a", "b").add_edge("b", "c").add_edge("d", "e")
        assert shortest_path(graph, "a", "c") == Path(["a", "b", "c"], 2)

    def test_non_comparable_nodes(self, graph):
        """Nodes that cannot be ordered still work."""
        a, b, c = object(), object(), object()
        graph.add_edge(a, b, 1).add_edge(a, c, 1).add_edge(b, c, 5)
        assert shortest_path(graph, a, c).nodes == [a, c]

    def test_graph_is_unchanged(self, cormen_graph):
        """Searching does not mutate the graph."""
        before = cormen_graph.serialize()
        cormen_graph.shortest_path("s", "x")
        assert cormen_graph.serialize() == before
