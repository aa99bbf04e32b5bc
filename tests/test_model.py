import pytest
from pydantic import ValidationError

from MaximalCliques import Graph, InvalidArgument
from MaximalCliques.graph.model import CliqueResult, GraphPayload


def test_payload_round_trip():
    g = Graph.from_edges(4, [(0, 1), (1, 2), (2, 0)])
    payload = GraphPayload.from_graph(g, uuid="abc", label="triangle")
    assert payload.adjacency_list == [[1, 2], [0, 2], [0, 1], []]
    restored = GraphPayload.model_validate_json(payload.model_dump_json()).to_graph()
    assert restored.edges() == g.edges()
    assert restored.n == 4


def test_payload_rejects_negative_node_count():
    with pytest.raises(ValidationError):
        GraphPayload(number_of_nodes=-1, adjacency_list=[])


def test_payload_strict_edges():
    payload = GraphPayload(number_of_nodes=2, adjacency_list=[[1, 5], [0]])
    with pytest.raises(InvalidArgument):
        payload.to_graph()
    assert payload.to_graph(strict=False).edges() == [(0, 1)]


def test_clique_result_is_sorted():
    result = CliqueResult.from_cliques(
        4, [frozenset({3}), frozenset({2, 0, 1})], complete=True
    )
    assert result.cliques == [[0, 1, 2], [3]]
    assert result.number_of_cliques == 2
    assert result.number_of_nodes == 4


def test_payload_rejects_row_count_mismatch():
    with pytest.raises(ValidationError):
        GraphPayload(number_of_nodes=3, adjacency_list=[[1], [0]])
    with pytest.raises(ValidationError):
        GraphPayload(number_of_nodes=1, adjacency_list=[[], []])
