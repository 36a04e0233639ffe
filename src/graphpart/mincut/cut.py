from typing import AbstractSet, Hashable

from ..graph.utils import order_by_index
from ..graph.view import GraphView
from .models import CutResult


def build_cut_result(view: GraphView, side: AbstractSet[Hashable]) -> CutResult:
    """
    Turn one side of a two-way split into a CutResult.

    Cut edges are oriented from ``side`` to the complement. For directed
    graphs only arcs leaving ``side`` cross the cut. The cut value is the
    summed weight of the cut edges.
    """
    partition1 = order_by_index(side, view.index)
    partition2 = [v for v in view.index if v not in side]

    cut_edges = []
    for u, v, w in view.edges():
        if u in side and v not in side:
            cut_edges.append((u, v, w))
        elif not view.directed and v in side and u not in side:
            cut_edges.append((v, u, w))

    return CutResult(
        partition1=partition1,
        partition2=partition2,
        cut_edges=cut_edges,
        cut_value=sum(w for _, _, w in cut_edges),
    )
