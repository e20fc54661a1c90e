"""
Unit tests for phragmen/result.py.
"""

from fractions import Fraction
import networkx as nx
import pytest

from phragmen.seqphragmen import compute_seqphragmen


@pytest.fixture
def result(default_ballots):
    return compute_seqphragmen(default_ballots, 2, algorithm="standard-fractions")


def test_str_elected(result, default_ballots):
    assert result.str_elected() == "2 elected candidates: Z, Y"
    assert str(result) == "2 elected candidates: Z, Y"
    assert str(compute_seqphragmen(default_ballots, 1)) == "1 elected candidate: Z"
    assert str(compute_seqphragmen(default_ballots, 0)) == "No elected candidates"


def test_str_weights(result):
    lines = result.str_weights().split("\n")
    assert lines == [
        " A -> Y: 10",
        " B -> Z: 20",
        " C -> Y: 270/13",
        " C -> Z: 120/13",
        " C -> Z: 50",
    ]


def test_candidate_ids(result):
    assert result.cand_names == ["X", "Y", "Z"]
    assert result.elected_ids == ["Z", "Y"]
    assert result.committee == {1, 2}


def test_to_networkx(result):
    graph = result.to_networkx()

    assert isinstance(graph, nx.MultiGraph)
    assert graph.number_of_nodes() == 7
    assert graph.number_of_edges() == 7
    assert nx.is_bipartite(graph)

    voter_nodes = {node for node, side in graph.nodes(data="bipartite") if side == 0}
    assert voter_nodes == {("voter", v) for v in range(4)}
    assert graph.nodes[("voter", 2)]["voter_id"] == "C"
    assert graph.nodes[("voter", 2)]["load"] == Fraction(13, 400)
    assert graph.nodes[("candidate", 2)]["cand_id"] == "Z"
    assert graph.nodes[("candidate", 2)]["elected"]
    assert not graph.nodes[("candidate", 0)]["elected"]
    assert graph.nodes[("candidate", 1)]["support"] == Fraction(400, 13)
    assert graph.nodes[("candidate", 0)]["approval"] == 30

    # edge keys are the edge indices
    edge = graph.edges[("voter", 2), ("candidate", 1), 4]
    assert edge["weight"] == Fraction(270, 13)
    assert edge["load"] == Fraction(9, 400)


def test_to_networkx_keeps_duplicate_approvals():
    result = compute_seqphragmen([("A", 10, ["X", "X"])], 1)
    graph = result.to_networkx()

    assert graph.number_of_edges() == 2
    weights = sorted(
        data["weight"] for _, _, data in graph.edges(("voter", 0), data=True)
    )
    assert weights == pytest.approx([0, 10])
    assert graph.degree(("candidate", 0)) == 2


def test_voter_loads_and_support(result):
    assert result.voter_loads() == [
        ("A", Fraction(13, 400)),
        ("B", Fraction(1, 100)),
        ("C", Fraction(13, 400)),
        ("C", Fraction(1, 100)),
    ]
    assert result.candidate_support() == {
        "X": 0,
        "Y": Fraction(400, 13),
        "Z": Fraction(1030, 13),
    }
