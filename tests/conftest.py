"""
Pytest configuration for graph library tests.

Fixtures build the sample graphs shared by several test modules.
"""
import pytest

from nodegraph import Graph, UndirectedGraph


@pytest.fixture
def graph():
    """Empty directed graph."""
    return Graph()


@pytest.fixture
def undirected():
    """Empty undirected graph."""
    return UndirectedGraph()


@pytest.fixture
def cormen_graph():
    """Weighted example from Cormen et al., "Introduction to Algorithms" p. 659."""
    g = Graph()
    g.add_edge("s", "t", 10)
    g.add_edge("s", "y", 5)
    g.add_edge("t", "y", 2)
    g.add_edge("y", "t", 3)
    g.add_edge("t", "x", 1)
    g.add_edge("y", "x", 9)
    g.add_edge("y", "z", 2)
    g.add_edge("x", "z", 4)
    g.add_edge("z", "x", 6)
    return g


@pytest.fixture
def clothing_graph():
    """Getting-dressed DAG from Cormen et al. p. 613."""
    g = Graph()
    g.add_edge("socks", "shoes")
    g.add_edge("shirt", "belt")
    g.add_edge("shirt", "tie")
    g.add_edge("tie", "jacket")
    g.add_edge("belt", "jacket")
    g.add_edge("pants", "shoes")
    g.add_edge("underpants", "pants")
    g.add_edge("pants", "belt")
    return g


@pytest.fixture
def ancestry_graph():
    """DAG with two roots sharing descendants, plus an isolated node f."""
    g = Graph()
    g.add_edge("a", "b")
    g.add_edge("b", "d")
    g.add_edge("c", "d")
    g.add_edge("b", "e")
    g.add_edge("c", "e")
    g.add_edge("d", "g")
    g.add_edge("e", "g")
    g.add_node("f")
    return g


def comes_before(order, first, second):
    """True if `first` appears before `second` in `order`."""
    return order.index(first) < order.index(second)
