"""
Girvan-Newman divisive partitioning.

Repeatedly removes the edge with the highest betweenness from a private copy
of the graph and records the resulting connected components as one
dendrogram node. Modularity of every node is measured against the original,
unreduced graph. Picking the "best" node is left to the caller.

References:
- Girvan, M., & Newman, M. E. J. (2002). Community structure in social
  and biological networks. PNAS, 99(12), 7821-7826.
"""

import logging
from typing import Any, Dict, Hashable, List, Optional, Set, Tuple, Union

import networkx as nx
from tqdm import tqdm

from ..config import DivisiveOptions, resolve_options
from ..graph.betweenness import accumulate_edge_betweenness
from ..graph.evaluation import membership_of, partition_modularity
from ..graph.utils import connected_components, order_by_index
from ..graph.view import as_view
from .models import DendrogramNode

logger = logging.getLogger(__name__)

# Betweenness scores closer than this are ties
TIE_TOLERANCE = 1e-10


class DivisivePartitioner:
    def __init__(self, graph: nx.Graph, weight: str = "weight"):
        self.view = as_view(graph, weight)
        self.nodes = self.view.vertices()

    def partition(self, options: Union[DivisiveOptions, Dict[str, Any], None] = None,
                  **overrides: Any) -> List[DendrogramNode]:
        """
        Build the dendrogram, ordered from fewest to most removed edges.
        Node 0 is the unmodified graph.
        """
        opts = resolve_options(DivisiveOptions, options, **overrides)
        directed = self.view.directed
        working = self.view.adjacency()
        # Self-loops never lie on a shortest path and never split a component
        remaining = [e for e in self.view.edges() if e[0] != e[1]]
        for v in working:
            working[v].pop(v, None)

        dendrogram = [self._snapshot(0, working, None, opts.min_community_size)]

        with tqdm(total=len(remaining), desc="Edge removals", disable=not opts.show_progress) as bar:
            while remaining:
                if opts.max_steps is not None and len(dendrogram) - 1 >= opts.max_steps:
                    break
                if (opts.max_communities is not None
                        and len(dendrogram[-1].reported_communities) >= opts.max_communities):
                    break

                scores = accumulate_edge_betweenness(working, remaining, directed=directed,
                                                     weighted=opts.weighted)
                u, v = _select_edge(scores)
                del working[u][v]
                if not directed:
                    del working[v][u]
                remaining = [e for e in remaining if (e[0], e[1]) != (u, v)]

                dendrogram.append(self._snapshot(len(dendrogram), working, (u, v),
                                                 opts.min_community_size))
                bar.update(1)

        logger.info("divisive partition: %d steps, %d -> %d communities",
                    len(dendrogram) - 1, dendrogram[0].num_communities, dendrogram[-1].num_communities)
        return dendrogram

    def _snapshot(self, step: int, working: Dict[Hashable, Dict[Hashable, float]],
                  removed_edge: Optional[Tuple[Hashable, Hashable]],
                  min_community_size: int) -> DendrogramNode:
        adj = working if not self.view.directed else _symmetric(working)
        components = connected_components(self.nodes, adj)
        communities = [order_by_index(comp, self.view.index) for comp in components]
        score = partition_modularity(self.view, membership_of(communities))
        logger.debug("step %d: removed %s, %d communities, Q=%.4f",
                     step, removed_edge, len(communities), score)
        return DendrogramNode(
            step=step,
            communities=communities,
            reported_communities=[c for c in communities if len(c) >= min_community_size],
            modularity=score,
            removed_edge=removed_edge,
        )


def _select_edge(scores: Dict[Tuple[Hashable, Hashable], float]) -> Tuple[Hashable, Hashable]:
    """Highest-betweenness edge; the earliest edge in graph order wins ties."""
    best_edge = None
    best_score = float('-inf')
    for edge, score in scores.items():
        if score > best_score + TIE_TOLERANCE:
            best_edge, best_score = edge, score
    return best_edge


def _symmetric(adj: Dict[Hashable, Dict[Hashable, float]]) -> Dict[Hashable, Set[Hashable]]:
    sym: Dict[Hashable, Set[Hashable]] = {v: set(nbrs) for v, nbrs in adj.items()}
    for u, nbrs in adj.items():
        for v in nbrs:
            sym[v].add(u)
    return sym


def divisive_partition(graph: nx.Graph,
                       options: Optional[Union[DivisiveOptions, Dict[str, Any]]] = None,
                       weight: str = "weight",
                       **overrides: Any) -> List[DendrogramNode]:
    """
    Girvan-Newman dendrogram of ``graph``.

    Each node lists every vertex exactly once across its communities.
    Unbounded runs cost O(E * V * E); pass ``max_communities`` or
    ``max_steps`` to bound them.
    """
    opts = resolve_options(DivisiveOptions, options, **overrides)
    return DivisivePartitioner(graph, weight).partition(opts)
