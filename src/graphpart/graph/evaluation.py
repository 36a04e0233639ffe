import logging
from typing import Any, Dict, Hashable, Iterable, List, Mapping

import networkx as nx
import numpy as np

from .utils import connected_components
from .view import GraphView, as_view

logger = logging.getLogger(__name__)


def modularity(graph: nx.Graph, communities: Iterable[Iterable[Hashable]],
               resolution: float = 1.0, weight: str = "weight") -> float:
    """
    Newman-Girvan modularity of a partition, weighted.

    Q = sum_c [ L_c / m - resolution * (d_c / 2m)^2 ]

    where L_c is the weight of edges inside community c, d_c the summed
    weighted degree of its members and m the total edge weight. Directed
    graphs are scored on their underlying undirected graph. A graph with no
    edge weight scores 0.
    """
    view = as_view(graph, weight)
    return partition_modularity(view, membership_of(communities), resolution)


def membership_of(communities: Iterable[Iterable[Hashable]]) -> Dict[Hashable, int]:
    """Map each vertex to the index of the community holding it."""
    membership = {}
    for i, community in enumerate(communities):
        for v in community:
            membership[v] = i
    return membership


def partition_modularity(view: GraphView, membership: Mapping[Hashable, int],
                         resolution: float = 1.0) -> float:
    total_weight = view.total_weight()
    if total_weight == 0:
        return 0.0

    internal: Dict[int, float] = {}
    degree_sum: Dict[int, float] = {}
    for u, v, w in view.edges():
        cu, cv = membership.get(u), membership.get(v)
        if cu is not None:
            degree_sum[cu] = degree_sum.get(cu, 0.0) + w
        if cv is not None:
            degree_sum[cv] = degree_sum.get(cv, 0.0) + w
        if cu is not None and cu == cv:
            internal[cu] = internal.get(cu, 0.0) + w

    q = 0.0
    for c, d in degree_sum.items():
        q += internal.get(c, 0.0) / total_weight - resolution * (d / (2.0 * total_weight)) ** 2
    return q


def evaluate_partition(G: nx.Graph, partition: List[Iterable[Hashable]],
                       weight: str = "weight") -> Dict[str, Any]:
    """
    Evaluate partition quality metrics

    Args:
        G: Input graph
        partition: List of vertex collections, one per part

    Returns:
        Dictionary with metrics:
        - connectivity: Whether each part is non-empty and (weakly) connected
        - cut_edges: Number of edges between parts
        - cut_weight: Total weight of edges between parts
        - modularity: Weighted Newman-Girvan modularity
        - balance: 1 - max relative deviation of part sizes from the mean
        - cut_ratio: Share of edges that cross parts
    """
    view = as_view(G, weight)
    parts = [list(part) for part in partition]
    metrics: Dict[str, Any] = {}

    adj = view.undirected_adjacency()
    metrics['connectivity'] = all(
        part and len(connected_components(part, adj)) == 1 for part in parts
    )

    node_to_part = membership_of(parts)
    cut_edges = 0
    cut_weight = 0.0
    for u, v, w in view.edges():
        if node_to_part.get(u) != node_to_part.get(v):
            cut_edges += 1
            cut_weight += w

    metrics['cut_edges'] = cut_edges
    metrics['cut_weight'] = cut_weight
    metrics['modularity'] = partition_modularity(view, node_to_part)

    sizes = np.array([len(part) for part in parts], dtype=float)
    if sizes.size and sizes.mean() > 0:
        avg_size = sizes.mean()
        metrics['balance'] = float(1 - np.abs(sizes - avg_size).max() / avg_size)
        metrics['size_std'] = float(sizes.std())
    else:
        metrics['balance'] = 0.0
        metrics['size_std'] = 0.0

    if view.edge_count() > 0:
        metrics['cut_ratio'] = cut_edges / view.edge_count()
    else:
        metrics['cut_ratio'] = 0.0

    logger.debug("partition metrics: %s", metrics)
    return metrics
