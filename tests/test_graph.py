import networkx as nx
import numpy as np
import pytest

from MaximalCliques import Graph, InvalidArgument


def test_empty_graph():
    g = Graph(0)
    assert len(g) == 0
    assert g.number_of_edges() == 0
    assert g.edges() == []


def test_negative_vertex_count_rejected():
    with pytest.raises(InvalidArgument):
        Graph(-1)


def test_non_integer_vertex_count_rejected():
    with pytest.raises(InvalidArgument):
        Graph(2.5)
    with pytest.raises(InvalidArgument):
        Graph(True)


def test_invalid_argument_is_value_error():
    assert issubclass(InvalidArgument, ValueError)


def test_add_edge_is_symmetric():
    g = Graph(3)
    g.add_edge(0, 2)
    assert g.is_adjacent(0, 2)
    assert g.is_adjacent(2, 0)
    assert not g.is_adjacent(0, 1)
    assert np.array_equal(g.adj, g.adj.T)
    assert not g.adj.diagonal().any()


def test_add_edge_is_idempotent():
    g = Graph(2)
    g.add_edge(0, 1)
    g.add_edge(1, 0)
    assert g.number_of_edges() == 1
    assert g.degree(0) == 1


def test_strict_rejects_out_of_range():
    g = Graph(3)
    with pytest.raises(InvalidArgument):
        g.add_edge(0, 3)
    with pytest.raises(InvalidArgument):
        g.add_edge(-1, 0)
    assert g.number_of_edges() == 0


def test_strict_rejects_self_loop():
    g = Graph(3)
    with pytest.raises(InvalidArgument):
        g.add_edge(1, 1)


def test_lenient_ignores_bad_edges():
    g = Graph(3, strict=False)
    g.add_edge(0, 3)
    g.add_edge(-1, 2)
    g.add_edge(1, 1)
    g.add_edge(0, 1)
    assert g.edges() == [(0, 1)]
    assert not g.adj.diagonal().any()


def test_neighbors_and_degree():
    g = Graph.from_edges(4, [(0, 1), (0, 2), (2, 3)])
    assert g.neighbors(0) == {1, 2}
    assert g.neighbors(3) == {2}
    assert g.degree(0) == 2
    assert g.degree(1) == 1
    assert g.degrees().tolist() == [2, 1, 2, 1]


def test_neighbors_excludes_self():
    g = Graph.from_edges(3, [(0, 1), (1, 2), (2, 0)])
    for v in range(3):
        assert v not in g.neighbors(v)


def test_queries_reject_out_of_range():
    g = Graph(2)
    with pytest.raises(InvalidArgument):
        g.neighbors(2)
    with pytest.raises(InvalidArgument):
        g.degree(-1)
    with pytest.raises(InvalidArgument):
        g.is_adjacent(0, 5)


def test_edges_listed_once():
    g = Graph.from_edges(4, [(3, 0), (1, 2), (2, 1)])
    assert g.edges() == [(0, 3), (1, 2)]
    assert g.number_of_edges() == 2


def test_from_adjacency_list():
    g = Graph.from_adjacency_list([[1, 2], [0], [0], []])
    assert g.edges() == [(0, 1), (0, 2)]
    assert g.degree(3) == 0


def test_from_adjacency_list_one_sided():
    g = Graph.from_adjacency_list([[1], []])
    assert g.is_adjacent(1, 0)


def test_networkx_round_trip():
    nx_graph = nx.petersen_graph()
    g = Graph.from_networkx(nx_graph)
    assert g.number_of_nodes == 10
    assert g.number_of_edges() == 15
    back = g.to_networkx()
    assert sorted(back.nodes()) == sorted(nx_graph.nodes())
    assert {frozenset(e) for e in back.edges()} == {frozenset(e) for e in nx_graph.edges()}


def test_to_networkx_keeps_isolated_vertices():
    g = Graph(3)
    assert sorted(g.to_networkx().nodes()) == [0, 1, 2]


def test_repr():
    g = Graph.from_edges(3, [(0, 1)])
    assert repr(g) == "Graph(n=3, edges=1)"
