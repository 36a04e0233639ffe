"""
Graph-read contract and shared utilities: components, betweenness, modularity.
"""

from .view import GraphView, as_view
from .graph_loader import load_graph, get_graph_stats
from .utils import connected_components, UnionFind
from .betweenness import edge_betweenness
from .evaluation import modularity, evaluate_partition

__all__ = [
    'GraphView',
    'as_view',
    'load_graph',
    'get_graph_stats',
    'connected_components',
    'UnionFind',
    'edge_betweenness',
    'modularity',
    'evaluate_partition'
]
