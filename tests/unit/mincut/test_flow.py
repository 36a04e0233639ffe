"""Tests for mincut/flow.py: augmenting-path max flow and s-t cuts."""

import random

import networkx as nx
import pytest

from graphpart.errors import InvalidInputError, MissingVertexError
from graphpart.mincut.flow import max_flow, min_st_cut
from graphpart.mincut.models import CutResult, MaxFlowResult


@pytest.mark.parametrize("method", ["edmonds_karp", "ford_fulkerson"])
class TestMinSTCut:
    def test_flow_network(self, flow_network, method):
        result = min_st_cut(flow_network, "S", "T", method=method)
        assert isinstance(result, CutResult)
        assert result.cut_value == pytest.approx(2.0)
        assert result.partition1 == ["S", "A"]
        assert result.partition2 == ["T", "B"]
        assert result.cut_edges == [("S", "B", 1.0), ("A", "T", 1.0)]

    def test_undirected_path(self, method):
        g = nx.Graph()
        g.add_edge("A", "B", weight=3)
        g.add_edge("B", "C", weight=2)
        result = min_st_cut(g, "A", "C", method=method)
        assert result.cut_value == pytest.approx(2.0)
        assert result.cut_edges == [("B", "C", 2.0)]
        assert result.partition1 == ["A", "B"]

    def test_bridge_between_triangles(self, bridged_triangles, method):
        result = min_st_cut(bridged_triangles, "A", "F", method=method)
        assert result.cut_value == pytest.approx(1.0)
        assert result.cut_edges == [("C", "D", 1.0)]

    def test_unreachable_sink(self, disjoint_triangles, method):
        result = min_st_cut(disjoint_triangles, "A1", "B1", method=method)
        assert result.cut_value == 0.0
        assert result.cut_edges == []
        assert result.partition1 == ["A1", "A2", "A3"]

    def test_partition_covers_graph(self, karate, method):
        result = min_st_cut(karate, 0, 33, method=method)
        assert set(result.partition1) | set(result.partition2) == set(karate)
        assert not set(result.partition1) & set(result.partition2)
        assert 0 in result.partition1
        assert 33 in result.partition2
        assert result.cut_value == pytest.approx(sum(w for _, _, w in result.cut_edges))


class TestMaxFlow:
    def test_flow_network(self, flow_network):
        result = max_flow(flow_network, "S", "T")
        assert isinstance(result, MaxFlowResult)
        assert result.flow_value == pytest.approx(2.0)
        assert result.flow["S"]["A"] == pytest.approx(1.0)
        assert result.flow["B"]["T"] == pytest.approx(1.0)
        assert result.source_side == ["S", "A"]
        assert result.sink_side == ["T", "B"]

    @pytest.mark.parametrize("method", ["edmonds_karp", "ford_fulkerson"])
    def test_matches_networkx(self, method):
        g = nx.gnp_random_graph(20, 0.25, seed=7, directed=True)
        rng = random.Random(2)
        for u, v in g.edges():
            g[u][v]["weight"] = rng.randint(1, 9)
        expected = nx.maximum_flow_value(g, 0, 19, capacity="weight")
        assert max_flow(g, 0, 19, method=method).flow_value == pytest.approx(expected)
        assert min_st_cut(g, 0, 19, method=method).cut_value == pytest.approx(expected)

    def test_flow_conservation(self):
        g = nx.gnp_random_graph(15, 0.3, seed=4, directed=True)
        rng = random.Random(9)
        for u, v in g.edges():
            g[u][v]["weight"] = rng.randint(1, 5)
        result = max_flow(g, 0, 14)
        for v in g:
            if v in (0, 14):
                continue
            inflow = sum(result.flow.get(u, {}).get(v, 0.0) for u in g.predecessors(v))
            outflow = sum(result.flow.get(v, {}).values())
            assert inflow == pytest.approx(outflow)
        for u, nbrs in result.flow.items():
            for v, f in nbrs.items():
                assert 0.0 <= f <= g[u][v]["weight"]

    def test_undirected_flow_runs_one_way(self):
        g = nx.Graph()
        g.add_edge("A", "B", weight=3)
        g.add_edge("B", "C", weight=2)
        result = max_flow(g, "A", "C")
        assert result.flow["A"]["B"] == pytest.approx(2.0)
        assert result.flow["B"]["A"] == 0.0
        assert result.flow["B"]["C"] == pytest.approx(2.0)


class TestTerminalErrors:
    def test_missing_source(self, flow_network):
        with pytest.raises(MissingVertexError) as exc_info:
            min_st_cut(flow_network, "X", "T")
        assert exc_info.value.vertex == "X"
        assert exc_info.value.role == "source"

    def test_missing_sink(self, flow_network):
        with pytest.raises(MissingVertexError) as exc_info:
            max_flow(flow_network, "S", "Y")
        assert exc_info.value.vertex == "Y"
        assert isinstance(exc_info.value, LookupError)

    def test_source_equals_sink(self, flow_network):
        with pytest.raises(InvalidInputError):
            min_st_cut(flow_network, "S", "S")

    def test_unknown_method(self, flow_network):
        with pytest.raises(InvalidInputError):
            min_st_cut(flow_network, "S", "T", method="push_relabel")
