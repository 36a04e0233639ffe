"""
Louvain-style modularity optimization with leaf pruning, importance ordering
and threshold cycling.

Community aggregates are held in lists indexed by community id and are
updated on every move, so a move costs O(degree) and modularity is read
from the aggregates in O(#communities).
"""

import logging
import math
from typing import Any, Dict, Hashable, List, Optional, Union

import networkx as nx

from ..config import ModularityOptions, resolve_options
from ..graph.view import as_view
from .models import CommunityResult

logger = logging.getLogger(__name__)

# Gains closer than this are treated as equal so float noise cannot trigger moves
GAIN_EPSILON = 1e-12


def cycled_threshold(base: float, iteration: int, cycling: bool = True) -> float:
    """Minimum gain a move must beat on ``iteration``; halves every 10 iterations."""
    if not cycling:
        return 0.0
    return base * 0.5 ** (iteration / 10)


class ModularityOptimizer:
    def __init__(self, graph: nx.Graph, weight: str = "weight"):
        self.view = as_view(graph, weight)
        self.nodes: List[Hashable] = self.view.vertices()
        self.adj_list = self._build_adjacency_list()
        self.pruning_stats = {'leaf_nodes_pruned': 0, 'isolated_nodes_skipped': 0}

    def _build_adjacency_list(self) -> List[Dict[int, float]]:
        """
        Convert the graph to index-based symmetric weighted adjacency.
        Self-loops are kept apart in ``self.self_loops``.
        """
        index = self.view.index
        n = len(self.nodes)
        adj: List[Dict[int, float]] = [dict() for _ in range(n)]
        self.self_loops = [0.0] * n
        for u, v, w in self.view.edges():
            i, j = index[u], index[v]
            if i == j:
                self.self_loops[i] += w
                continue
            adj[i][j] = adj[i].get(j, 0.0) + w
            adj[j][i] = adj[j].get(i, 0.0) + w
        return adj

    def _initialize(self) -> None:
        """Every vertex in its own community."""
        n = len(self.nodes)
        self.community = list(range(n))
        # Weighted degree; a self-loop adds twice its weight
        self.node_weights = [sum(self.adj_list[i].values()) + 2 * self.self_loops[i] for i in range(n)]
        self.node_degrees = [len(self.adj_list[i]) for i in range(n)]
        self.total_weight = sum(self.node_weights) / 2.0
        # Aggregates indexed by community id
        self.community_weights = list(self.node_weights)
        self.internal_weights = [2 * loop for loop in self.self_loops]

    def _importance_order(self) -> List[int]:
        """Vertices by descending degree * log(1 + weighted degree), stable on graph order."""
        importance = [self.node_degrees[i] * math.log(1 + self.node_weights[i])
                      for i in range(len(self.nodes))]
        return sorted(range(len(self.nodes)), key=lambda i: -importance[i])

    def _weights_to_communities(self, node: int) -> Dict[int, float]:
        """Edge weight from ``node`` to each neighbouring community."""
        links: Dict[int, float] = {}
        for nb, w in self.adj_list[node].items():
            c = self.community[nb]
            links[c] = links.get(c, 0.0) + w
        return links

    def _remove(self, node: int, community: int, weight_to_community: float) -> None:
        self.community_weights[community] -= self.node_weights[node]
        self.internal_weights[community] -= 2 * weight_to_community + 2 * self.self_loops[node]
        self.community[node] = -1

    def _insert(self, node: int, community: int, weight_to_community: float) -> None:
        self.community_weights[community] += self.node_weights[node]
        self.internal_weights[community] += 2 * weight_to_community + 2 * self.self_loops[node]
        self.community[node] = community

    def _gain(self, node: int, community: int, weight_to_community: float, resolution: float) -> float:
        m = self.total_weight
        return (weight_to_community
                - resolution * self.node_weights[node] * self.community_weights[community] / (2 * m)) / m

    def modularity(self, resolution: float = 1.0) -> float:
        """Modularity of the current assignment, read from the aggregates."""
        m = self.total_weight
        if m == 0:
            return 0.0
        q = 0.0
        for c, tot in enumerate(self.community_weights):
            if tot == 0 and self.internal_weights[c] == 0:
                continue
            # internal weights are stored doubled
            q += (self.internal_weights[c] / 2.0) / m - resolution * (tot / (2.0 * m)) ** 2
        return q

    def _local_moving(self, order: List[int], prune_leaves: bool, threshold: float,
                      resolution: float) -> bool:
        """
        Sweep ``order`` until no vertex moves. Moves are applied immediately.
        Returns True if any vertex changed community.
        """
        improvement = False
        has_changed = True
        threshold = max(threshold, GAIN_EPSILON)

        while has_changed:
            has_changed = False

            for node in order:
                if prune_leaves and self.node_degrees[node] == 1:
                    self.pruning_stats['leaf_nodes_pruned'] += 1
                    continue
                if self.node_degrees[node] == 0:
                    self.pruning_stats['isolated_nodes_skipped'] += 1
                    continue

                current = self.community[node]
                links = self._weights_to_communities(node)
                self._remove(node, current, links.get(current, 0.0))

                best_community = current
                best_gain = self._gain(node, current, links.get(current, 0.0), resolution)
                for community, weight in links.items():
                    if community == current:
                        continue
                    gain = self._gain(node, community, weight, resolution)
                    if gain > best_gain + threshold:
                        best_gain = gain
                        best_community = community

                self._insert(node, best_community, links.get(best_community, 0.0))
                if best_community != current:
                    has_changed = True
                    improvement = True

        return improvement

    def optimize(self, options: Union[ModularityOptions, Dict[str, Any], None] = None,
                 **overrides: Any) -> CommunityResult:
        """
        Run the optimizer.

        Args:
            options: ModularityOptions, dict of option values, or None for defaults
            **overrides: Individual option values

        Returns:
            CommunityResult with communities (in graph order), modularity and iterations
        """
        opts = resolve_options(ModularityOptions, options, **overrides)
        self._initialize()
        self.pruning_stats = {'leaf_nodes_pruned': 0, 'isolated_nodes_skipped': 0}

        if not self.nodes:
            return CommunityResult(communities=[], modularity=0.0, iterations=0)

        modularity = self.modularity(opts.resolution)
        iteration = 0
        improved = self.total_weight > 0

        # Sweep order depends only on degrees
        order = self._importance_order() if opts.importance_ordering else list(range(len(self.nodes)))

        while iteration < opts.max_iterations and improved:
            threshold = cycled_threshold(opts.pruning_threshold, iteration, opts.threshold_cycling)

            improved = self._local_moving(order, opts.prune_leaves, threshold, opts.resolution)

            if improved:
                new_modularity = self.modularity(opts.resolution)
                converged = abs(new_modularity - modularity) < opts.tolerance
                modularity = new_modularity
                if converged:
                    break
                iteration += 1

        result = CommunityResult(
            communities=self._groups(),
            modularity=modularity,
            iterations=iteration,
        )
        logger.info("modularity optimization: %d vertices -> %d communities, Q=%.4f, %d iterations",
                    len(self.nodes), len(result.communities), modularity, iteration)
        logger.debug("pruning stats: %s", self.pruning_stats)
        return result

    def _groups(self) -> List[List[Hashable]]:
        groups: Dict[int, List[Hashable]] = {}
        for i, node in enumerate(self.nodes):
            groups.setdefault(self.community[i], []).append(node)
        return list(groups.values())


def optimize_modularity(graph: nx.Graph,
                        options: Optional[Union[ModularityOptions, Dict[str, Any]]] = None,
                        weight: str = "weight",
                        **overrides: Any) -> CommunityResult:
    """
    Detect communities by local modularity maximization.

    Every vertex appears in exactly one returned community, including pruned
    leaves and isolated vertices. Options are validated before any work
    starts; invalid values raise InvalidInputError. ``weight`` names the edge
    attribute read as the edge weight.
    """
    opts = resolve_options(ModularityOptions, options, **overrides)
    return ModularityOptimizer(graph, weight).optimize(opts)
