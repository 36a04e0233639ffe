"""
Stoer-Wagner deterministic global minimum cut for undirected graphs.

Each minimum-cut phase grows a maximum-adjacency ordering from the first
remaining vertex; the weight connecting the last vertex ``t`` to the rest is
the cut-of-the-phase, and ``t`` is then merged into the second-to-last
vertex ``s``. After |V|-1 phases the smallest cut-of-the-phase is the global
minimum cut. Ties in the ordering go to the vertex that comes first in the
input graph, and the earliest phase wins ties between equal cuts.

Time Complexity: O(V E log V) with a binary heap
"""

import heapq
import logging
from typing import Dict, Hashable, List, Mapping, Tuple

import networkx as nx

from ..errors import UnsupportedGraphShapeError
from ..graph.view import as_view
from .cut import build_cut_result
from .models import CutResult

logger = logging.getLogger(__name__)

Adjacency = Dict[Hashable, Dict[Hashable, float]]


def _minimum_cut_phase(adj: Adjacency, active: List[Hashable],
                       rank: Mapping[Hashable, int]) -> Tuple[Hashable, Hashable, float]:
    """
    Grow a maximum-adjacency ordering over ``active``.

    Returns:
        (s, t, cut_of_the_phase) for the last two vertices added
    """
    connectivity = dict.fromkeys(active, 0.0)
    heap = [(0.0, rank[v], v) for v in active[1:]]
    heapq.heapify(heap)
    added = set()

    s = t = active[0]
    last = active[0]
    while True:
        added.add(last)
        for nb, w in adj[last].items():
            if nb not in added:
                connectivity[nb] += w
                heapq.heappush(heap, (-connectivity[nb], rank[nb], nb))

        # Next: most tightly connected vertex, skipping stale heap entries
        nxt = None
        while heap:
            neg_weight, _, v = heapq.heappop(heap)
            if v not in added and -neg_weight == connectivity[v]:
                nxt = v
                break
        if nxt is None:
            break
        s, t, last = t, nxt, nxt

    return s, t, connectivity[t]


def _merge(adj: Adjacency, members: Dict[Hashable, List[Hashable]], s, t) -> None:
    """Contract ``t`` into ``s``, summing parallel edge weights."""
    for nb, w in adj[t].items():
        if nb == s:
            continue
        adj[s][nb] = adj[s].get(nb, 0.0) + w
        adj[nb][s] = adj[nb].get(s, 0.0) + w
        del adj[nb][t]
    adj[s].pop(t, None)
    del adj[t]
    members[s].extend(members.pop(t))


def stoer_wagner(graph: nx.Graph, weight: str = 'weight') -> CutResult:
    """
    Global minimum cut of an undirected graph.

    Args:
        graph: Undirected networkx graph with non-negative weights
        weight: Edge attribute holding the weight

    Returns:
        CutResult; disconnected graphs give a cut of value 0 and graphs with
        fewer than two vertices put every vertex in ``partition1``

    Raises:
        UnsupportedGraphShapeError: If the graph is directed
    """
    view = as_view(graph, weight)
    if view.directed:
        raise UnsupportedGraphShapeError('stoer_wagner')

    nodes = view.vertices()
    if len(nodes) < 2:
        return CutResult(partition1=nodes, partition2=[], cut_edges=[], cut_value=0.0)

    adj = view.undirected_adjacency()
    for v in adj:
        adj[v].pop(v, None)
    members = {v: [v] for v in nodes}
    active = list(nodes)

    best_value = float('inf')
    best_side: List[Hashable] = []
    phase = 0
    while len(active) > 1:
        s, t, cut_of_phase = _minimum_cut_phase(adj, active, view.index)
        logger.debug("phase %d: s=%r t=%r cut=%s", phase, s, t, cut_of_phase)
        if cut_of_phase < best_value:
            best_value = cut_of_phase
            best_side = list(members[t])
        _merge(adj, members, s, t)
        active.remove(t)
        phase += 1

    result = build_cut_result(view, set(best_side))
    logger.info("stoer_wagner: %d vertices, min cut %s (%d edges)",
                len(nodes), result.cut_value, len(result.cut_edges))
    return result
