"""
Graph partitioning and community detection on networkx graphs.
"""

import logging

from .errors import (
    GraphPartitionError,
    InvalidInputError,
    MissingVertexError,
    UnsupportedGraphShapeError,
)
from .config import ModularityOptions, DivisiveOptions
from .graph import (
    GraphView,
    load_graph,
    get_graph_stats,
    connected_components,
    edge_betweenness,
    modularity,
    evaluate_partition,
)
from .community import (
    optimize_modularity,
    divisive_partition,
    CommunityResult,
    DendrogramNode,
)
from .mincut import (
    max_flow,
    min_st_cut,
    stoer_wagner,
    karger_min_cut,
    CutResult,
    MaxFlowResult,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = '0.1.0'

__all__ = [
    'GraphPartitionError',
    'InvalidInputError',
    'MissingVertexError',
    'UnsupportedGraphShapeError',
    'ModularityOptions',
    'DivisiveOptions',
    'GraphView',
    'load_graph',
    'get_graph_stats',
    'connected_components',
    'edge_betweenness',
    'modularity',
    'evaluate_partition',
    'optimize_modularity',
    'divisive_partition',
    'CommunityResult',
    'DendrogramNode',
    'max_flow',
    'min_st_cut',
    'stoer_wagner',
    'karger_min_cut',
    'CutResult',
    'MaxFlowResult'
]
