"""
Minimum cuts: max-flow s-t cut, Stoer-Wagner and Karger global cuts.
"""

from .flow import max_flow, min_st_cut
from .stoer_wagner import stoer_wagner
from .karger import karger_min_cut
from .models import CutResult, MaxFlowResult

__all__ = [
    'max_flow',
    'min_st_cut',
    'stoer_wagner',
    'karger_min_cut',
    'CutResult',
    'MaxFlowResult'
]
