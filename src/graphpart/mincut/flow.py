"""
Maximum flow by augmenting paths and the minimum s-t cut it certifies.

Residual capacities start at the edge weights (undirected edges carry
capacity both ways). Augmenting paths are found by BFS (Edmonds-Karp,
O(V E^2)) or DFS (Ford-Fulkerson, O(E f)). After saturation the vertices
still reachable from the source in the residual graph form the source side
of a minimum cut (max-flow/min-cut theorem).
"""

import logging
from collections import deque
from typing import Dict, Hashable, Optional

import networkx as nx

from ..errors import InvalidInputError, MissingVertexError
from ..graph.view import GraphView, as_view
from .cut import build_cut_result
from .models import CutResult, MaxFlowResult

logger = logging.getLogger(__name__)

Residual = Dict[Hashable, Dict[Hashable, float]]


def _bfs_augmenting_path(residual: Residual, source, sink) -> Optional[Dict[Hashable, Hashable]]:
    parent = {source: source}
    queue = deque([source])
    while queue:
        u = queue.popleft()
        for v, capacity in residual[u].items():
            if capacity > 0 and v not in parent:
                parent[v] = u
                if v == sink:
                    return parent
                queue.append(v)
    return None


def _dfs_augmenting_path(residual: Residual, source, sink) -> Optional[Dict[Hashable, Hashable]]:
    parent = {source: source}
    stack = [source]
    while stack:
        u = stack.pop()
        if u == sink:
            return parent
        for v, capacity in residual[u].items():
            if capacity > 0 and v not in parent:
                parent[v] = u
                stack.append(v)
    return None


METHODS = {
    'edmonds_karp': _bfs_augmenting_path,
    'ford_fulkerson': _dfs_augmenting_path,
}


def _check_terminals(view: GraphView, source, sink, method: str) -> None:
    if source not in view:
        raise MissingVertexError(source, 'source')
    if sink not in view:
        raise MissingVertexError(sink, 'sink')
    if source == sink:
        raise InvalidInputError(f"source and sink must differ, got {source!r} for both")
    if method not in METHODS:
        raise InvalidInputError(f"unknown max-flow method {method!r}; expected one of {sorted(METHODS)}")


def _build_residual(view: GraphView) -> Residual:
    residual: Residual = {v: {} for v in view.index}
    for u, v, w in view.edges():
        if u == v:
            continue
        residual[u][v] = residual[u].get(v, 0.0) + w
        if view.directed:
            residual[v].setdefault(u, 0.0)
        else:
            residual[v][u] = residual[v].get(u, 0.0) + w
    return residual


def _solve(view: GraphView, source, sink, method: str):
    residual = _build_residual(view)
    capacity = {u: dict(nbrs) for u, nbrs in residual.items()}
    find_path = METHODS[method]

    flow_value = 0.0
    augmentations = 0
    parent = find_path(residual, source, sink)
    while parent is not None:
        # Bottleneck along the path
        path_flow = float('inf')
        v = sink
        while v != source:
            u = parent[v]
            path_flow = min(path_flow, residual[u][v])
            v = u

        v = sink
        while v != source:
            u = parent[v]
            residual[u][v] -= path_flow
            residual[v][u] += path_flow
            v = u

        flow_value += path_flow
        augmentations += 1
        parent = find_path(residual, source, sink)

    logger.debug("%s: %d augmenting paths, flow %s", method, augmentations, flow_value)
    return flow_value, residual, capacity


def _reachable(residual: Residual, source) -> set:
    seen = {source}
    stack = [source]
    while stack:
        u = stack.pop()
        for v, capacity in residual[u].items():
            if capacity > 0 and v not in seen:
                seen.add(v)
                stack.append(v)
    return seen


def max_flow(graph: nx.Graph, source, sink, method: str = 'edmonds_karp',
             weight: str = 'weight') -> MaxFlowResult:
    """
    Maximum flow from ``source`` to ``sink`` with edge weights as capacities.

    Args:
        graph: networkx graph; undirected edges carry capacity in both directions
        source: Source vertex
        sink: Sink vertex
        method: 'edmonds_karp' (BFS paths) or 'ford_fulkerson' (DFS paths)
        weight: Edge attribute holding the capacity

    Returns:
        MaxFlowResult with the flow value, per-edge flow and the residual split

    Raises:
        MissingVertexError: If source or sink is not in the graph
        InvalidInputError: If source equals sink or the method is unknown
    """
    view = as_view(graph, weight)
    _check_terminals(view, source, sink, method)
    flow_value, residual, capacity = _solve(view, source, sink, method)

    flow: Dict[Hashable, Dict[Hashable, float]] = {}
    for u, v, w in view.edges():
        if u == v:
            continue
        net = capacity[u][v] - residual[u][v]
        flow.setdefault(u, {})[v] = max(0.0, min(w, net))
        if not view.directed:
            flow.setdefault(v, {})[u] = max(0.0, min(w, -net))

    side = _reachable(residual, source)
    return MaxFlowResult(
        flow_value=flow_value,
        flow=flow,
        source_side=[v for v in view.index if v in side],
        sink_side=[v for v in view.index if v not in side],
    )


def min_st_cut(graph: nx.Graph, source, sink, method: str = 'edmonds_karp',
               weight: str = 'weight') -> CutResult:
    """
    Minimum cut separating ``source`` from ``sink``.

    ``partition1`` holds the vertices reachable from the source in the
    saturated residual graph, ``partition2`` the rest; cut edges go from
    ``partition1`` to ``partition2`` and their weights sum to the max flow.
    """
    view = as_view(graph, weight)
    _check_terminals(view, source, sink, method)
    flow_value, residual, _ = _solve(view, source, sink, method)
    result = build_cut_result(view, _reachable(residual, source))
    logger.info("min s-t cut %r -> %r: flow %s, %d cut edges",
                source, sink, flow_value, len(result.cut_edges))
    return result
