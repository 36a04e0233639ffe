"""Shared graph fixtures for the partitioning tests."""

import networkx as nx
import pytest


@pytest.fixture
def bridged_triangles() -> nx.Graph:
    """Triangles {A,B,C} and {D,E,F} joined by the single bridge C-D."""
    g = nx.Graph()
    g.add_edges_from([("A", "B"), ("B", "C"), ("C", "A")])
    g.add_edges_from([("D", "E"), ("E", "F"), ("F", "D")])
    g.add_edge("C", "D")
    return g


@pytest.fixture
def disjoint_triangles() -> nx.Graph:
    g = nx.Graph()
    g.add_edges_from([("A1", "A2"), ("A2", "A3"), ("A3", "A1")])
    g.add_edges_from([("B1", "B2"), ("B2", "B3"), ("B3", "B1")])
    return g


@pytest.fixture
def k4() -> nx.Graph:
    return nx.complete_graph(["A", "B", "C", "D"])


@pytest.fixture
def star() -> nx.Graph:
    g = nx.Graph()
    g.add_edges_from([("C", leaf) for leaf in ["L1", "L2", "L3", "L4"]])
    return g


@pytest.fixture
def path4() -> nx.Graph:
    return nx.path_graph(["A", "B", "C", "D"])


@pytest.fixture
def flow_network() -> nx.DiGraph:
    g = nx.DiGraph()
    g.add_edge("S", "A", weight=10)
    g.add_edge("A", "T", weight=1)
    g.add_edge("S", "B", weight=1)
    g.add_edge("B", "T", weight=10)
    return g


@pytest.fixture
def single_vertex() -> nx.Graph:
    g = nx.Graph()
    g.add_node("A")
    return g


@pytest.fixture
def karate() -> nx.Graph:
    """Zachary's karate club without its interaction weights."""
    return nx.Graph(nx.karate_club_graph().edges())
