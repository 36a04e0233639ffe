"""
Community detection: Louvain-style modularity optimization and Girvan-Newman dendrograms.
"""

from .louvain import ModularityOptimizer, optimize_modularity
from .divisive import DivisivePartitioner, divisive_partition
from .models import CommunityResult, DendrogramNode

__all__ = [
    'ModularityOptimizer',
    'optimize_modularity',
    'DivisivePartitioner',
    'divisive_partition',
    'CommunityResult',
    'DendrogramNode'
]
