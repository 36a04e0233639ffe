"""Tests for mincut/stoer_wagner.py."""

import random

import networkx as nx
import pytest

from graphpart.errors import UnsupportedGraphShapeError
from graphpart.mincut.stoer_wagner import stoer_wagner


def assert_consistent_cut(graph, result):
    """Partitions split the vertex set and the cut edges are exactly the crossing ones."""
    side1, side2 = set(result.partition1), set(result.partition2)
    assert side1 and side2
    assert not side1 & side2
    assert side1 | side2 == set(graph)
    crossing = sum(d.get("weight", 1.0) for u, v, d in graph.edges(data=True)
                   if (u in side1) != (v in side1))
    assert result.cut_value == pytest.approx(crossing)
    for u, v, _ in result.cut_edges:
        assert u in side1 and v in side2


class TestStoerWagner:
    def test_bridged_triangles(self, bridged_triangles):
        result = stoer_wagner(bridged_triangles)
        assert result.cut_value == pytest.approx(1.0)
        assert [(u, v) for u, v, _ in result.cut_edges] in ([("C", "D")], [("D", "C")])
        assert {frozenset(result.partition1), frozenset(result.partition2)} == {
            frozenset("ABC"), frozenset("DEF"),
        }
        assert_consistent_cut(bridged_triangles, result)

    def test_complete_graph(self, k4):
        result = stoer_wagner(k4)
        assert result.cut_value == pytest.approx(3.0)
        assert len(result.cut_edges) == 3
        assert_consistent_cut(k4, result)

    def test_star_cuts_one_leaf(self, star):
        result = stoer_wagner(star)
        assert result.cut_value == pytest.approx(1.0)
        assert_consistent_cut(star, result)

    def test_path(self, path4):
        result = stoer_wagner(path4)
        assert result.cut_value == pytest.approx(1.0)
        assert_consistent_cut(path4, result)

    def test_weighted_edges(self):
        g = nx.Graph()
        g.add_edge("a", "b", weight=5)
        g.add_edge("b", "c", weight=0.5)
        g.add_edge("c", "d", weight=5)
        g.add_edge("d", "a", weight=0.25)
        result = stoer_wagner(g)
        assert result.cut_value == pytest.approx(0.75)
        assert {frozenset(result.partition1), frozenset(result.partition2)} == {
            frozenset("ab"), frozenset("cd"),
        }

    def test_disconnected_graph(self, disjoint_triangles):
        result = stoer_wagner(disjoint_triangles)
        assert result.cut_value == 0.0
        assert result.cut_edges == []
        assert_consistent_cut(disjoint_triangles, result)

    def test_matches_networkx(self):
        g = nx.connected_watts_strogatz_graph(30, 4, 0.2, seed=8)
        rng = random.Random(1)
        for u, v in g.edges():
            g[u][v]["weight"] = rng.randint(1, 10)
        expected, _ = nx.stoer_wagner(g)
        result = stoer_wagner(g)
        assert result.cut_value == pytest.approx(expected)
        assert_consistent_cut(g, result)

    def test_deterministic(self, karate):
        assert stoer_wagner(karate) == stoer_wagner(karate)

    def test_self_loops_ignored(self, path4):
        g = path4.copy()
        g.add_edge("B", "B", weight=10)
        assert stoer_wagner(g).cut_value == pytest.approx(1.0)

    def test_directed_rejected(self, flow_network):
        with pytest.raises(UnsupportedGraphShapeError):
            stoer_wagner(flow_network)

    def test_single_vertex(self, single_vertex):
        result = stoer_wagner(single_vertex)
        assert result.partition1 == ["A"]
        assert result.partition2 == []
        assert result.cut_value == 0.0

    def test_empty_graph(self):
        result = stoer_wagner(nx.Graph())
        assert result.partition1 == []
        assert result.cut_edges == []
