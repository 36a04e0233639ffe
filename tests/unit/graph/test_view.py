"""Tests for graph/view.py: graph-read contract over networkx graphs."""

import networkx as nx
import pytest

from graphpart.errors import InvalidInputError
from graphpart.graph.view import GraphView, as_view


class TestGraphView:
    def test_default_weight_is_one(self, path4):
        view = GraphView(path4)
        assert view.edge_weight("A", "B") == 1.0
        assert view.total_weight() == 3.0

    def test_weight_attribute(self):
        g = nx.Graph()
        g.add_edge(0, 1, weight=2.5)
        g.add_edge(1, 2, cost=4)
        view = GraphView(g)
        assert view.edge_weight(1, 0) == 2.5
        assert view.edge_weight(1, 2) == 1.0
        assert GraphView(g, weight="cost").edge_weight(1, 2) == 4.0

    def test_missing_edge_is_none(self, path4):
        assert GraphView(path4).edge_weight("A", "D") is None

    def test_directed_edge_weight_is_one_way(self, flow_network):
        view = GraphView(flow_network)
        assert view.edge_weight("S", "A") == 10.0
        assert view.edge_weight("A", "S") is None

    def test_counts_and_order(self, bridged_triangles):
        view = GraphView(bridged_triangles)
        assert view.vertex_count() == 6
        assert view.edge_count() == 7
        assert view.vertices() == ["A", "B", "C", "D", "E", "F"]
        assert view.index["D"] == 3
        assert "A" in view
        assert "Z" not in view
        assert len(view) == 6

    def test_neighbors(self, flow_network):
        view = GraphView(flow_network)
        assert set(view.neighbors("S")) == {"A", "B"}
        assert list(view.neighbors("T")) == []

    def test_negative_weight_rejected(self):
        g = nx.Graph()
        g.add_edge("a", "b", weight=-1)
        with pytest.raises(InvalidInputError):
            GraphView(g)

    def test_non_numeric_weight_rejected(self):
        g = nx.Graph()
        g.add_edge("a", "b", weight="heavy")
        with pytest.raises(InvalidInputError):
            GraphView(g)

    def test_nan_weight_rejected(self):
        g = nx.Graph()
        g.add_edge("a", "b", weight=float("nan"))
        with pytest.raises(InvalidInputError):
            GraphView(g)

    def test_multigraph_parallel_edges_summed(self):
        g = nx.MultiGraph()
        g.add_edge("a", "b", weight=1.0)
        g.add_edge("a", "b", weight=2.0)
        g.add_edge("b", "a")
        view = GraphView(g)
        assert view.edge_count() == 1
        assert view.edge_weight("a", "b") == 4.0

    def test_directed_adjacency(self):
        g = nx.DiGraph()
        g.add_edge("a", "b", weight=2)
        g.add_edge("b", "a", weight=3)
        view = GraphView(g)
        assert view.adjacency() == {"a": {"b": 2.0}, "b": {"a": 3.0}}
        assert view.undirected_adjacency() == {"a": {"b": 5.0}, "b": {"a": 5.0}}

    def test_self_loop_listed_once(self):
        g = nx.Graph()
        g.add_edge("a", "a", weight=2)
        g.add_edge("a", "b")
        adj = GraphView(g).adjacency()
        assert adj["a"] == {"a": 2.0, "b": 1.0}
        assert adj["b"] == {"a": 1.0}


class TestAsView:
    def test_passes_views_through(self, k4):
        view = GraphView(k4)
        assert as_view(view) is view

    def test_rejects_non_graphs(self):
        with pytest.raises(InvalidInputError):
            as_view({"a": {"b": 1}})

    def test_view_weight_attribute_must_match(self, k4):
        view = GraphView(k4, weight="capacity")
        assert as_view(view, weight="capacity") is view
        with pytest.raises(InvalidInputError):
            as_view(view)
