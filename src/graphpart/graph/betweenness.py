"""
Edge betweenness centrality (Brandes accumulation).

For every source vertex a single-source shortest-path search records the
number of shortest paths ``sigma`` and the predecessor lists; dependencies are
then pushed back along predecessors in reverse search order. When several
shortest paths exist, credit is split in proportion to path counts. Scores
of undirected edges are halved because every pair is visited from both ends.
"""

import heapq
from collections import deque
from itertools import count
from typing import Dict, Hashable, List, Mapping, Sequence, Tuple

import networkx as nx

from .view import Edge, as_view

Adjacency = Mapping[Hashable, Mapping[Hashable, float]]


def edge_betweenness(graph: nx.Graph, weighted: bool = False,
                     weight: str = "weight") -> Dict[Tuple[Hashable, Hashable], float]:
    """
    Compute edge betweenness for every edge of ``graph``.

    Args:
        graph: networkx graph (or GraphView)
        weighted: Use edge weights as path lengths (Dijkstra) instead of hop counts (BFS)
        weight: Edge attribute holding the weight

    Returns:
        Mapping (u, v) -> betweenness, keyed and ordered like the graph's edges
    """
    view = as_view(graph, weight)
    return accumulate_edge_betweenness(view.adjacency(), view.edges(),
                                       directed=view.directed, weighted=weighted)


def accumulate_edge_betweenness(adj: Adjacency, edges: Sequence[Edge], directed: bool,
                                weighted: bool = False) -> Dict[Tuple[Hashable, Hashable], float]:
    """Brandes accumulation over an adjacency mapping; raw (unnormalized) pair counts."""
    credit: Dict[Tuple[Hashable, Hashable], float] = {}

    for source in adj:
        if weighted:
            order, preds, sigma = _dijkstra_paths(adj, source)
        else:
            order, preds, sigma = _bfs_paths(adj, source)

        delta = dict.fromkeys(order, 0.0)
        while order:
            w = order.pop()
            coeff = (1.0 + delta[w]) / sigma[w]
            for v in preds[w]:
                c = sigma[v] * coeff
                credit[(v, w)] = credit.get((v, w), 0.0) + c
                delta[v] += c

    scores = {}
    for u, v, _ in edges:
        if directed:
            scores[(u, v)] = credit.get((u, v), 0.0)
        else:
            # Each unordered pair is accumulated once from each endpoint
            scores[(u, v)] = (credit.get((u, v), 0.0) + credit.get((v, u), 0.0)) / 2.0
    return scores


def _bfs_paths(adj: Adjacency, source) -> Tuple[List, Dict[Hashable, List], Dict[Hashable, float]]:
    order = []
    preds: Dict[Hashable, List] = {source: []}
    sigma: Dict[Hashable, float] = {source: 1.0}
    dist = {source: 0}
    queue = deque([source])

    while queue:
        v = queue.popleft()
        order.append(v)
        dv = dist[v]
        for w in adj[v]:
            if w == v:
                continue
            if w not in dist:
                dist[w] = dv + 1
                sigma[w] = 0.0
                preds[w] = []
                queue.append(w)
            if dist[w] == dv + 1:
                sigma[w] += sigma[v]
                preds[w].append(v)

    return order, preds, sigma


def _dijkstra_paths(adj: Adjacency, source) -> Tuple[List, Dict[Hashable, List], Dict[Hashable, float]]:
    order = []
    preds: Dict[Hashable, List] = {source: []}
    sigma: Dict[Hashable, float] = {source: 1.0}
    dist: Dict[Hashable, float] = {}
    seen = {source: 0.0}
    tie = count()
    heap = [(0.0, next(tie), source, source)]

    while heap:
        d, _, pred, v = heapq.heappop(heap)
        if v in dist:
            continue
        sigma[v] += sigma[pred] if pred != v else 0.0
        order.append(v)
        dist[v] = d
        for w, length in adj[v].items():
            if w == v:
                continue
            vw = d + length
            if w not in dist and (w not in seen or vw < seen[w]):
                seen[w] = vw
                heapq.heappush(heap, (vw, next(tie), v, w))
                sigma[w] = 0.0
                preds[w] = [v]
            elif vw == seen[w]:
                sigma[w] += sigma[v]
                preds[w].append(v)

    return order, preds, sigma
