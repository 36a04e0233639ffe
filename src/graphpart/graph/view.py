import logging
import math
from numbers import Real
from typing import Any, Dict, Hashable, Iterator, List, Optional, Tuple

import networkx as nx

from ..errors import InvalidInputError

logger = logging.getLogger(__name__)

Edge = Tuple[Hashable, Hashable, float]


class GraphView:
    """
    Read-only snapshot of a networkx graph used by every algorithm.

    Edge weights are read from the ``weight`` attribute (1.0 when absent),
    validated once, and parallel edges of multigraphs are summed. The node
    iteration order of the wrapped graph is recorded in ``index`` and is the
    tie-break order for all deterministic choices.
    """

    def __init__(self, graph: nx.Graph, weight: str = "weight"):
        self.graph = graph
        self.weight = weight
        self.directed = graph.is_directed()
        self.index: Dict[Hashable, int] = {v: i for i, v in enumerate(graph.nodes())}
        self._edges = self._collect_edges()
        self._weights = {(u, v): w for u, v, w in self._edges}

    def _collect_edges(self) -> List[Edge]:
        """Read every edge once, validating weights and merging parallel edges."""
        merged: Dict[Tuple[Hashable, Hashable], float] = {}
        for u, v, w in self.graph.edges(data=self.weight, default=1.0):
            w = _validate_weight(u, v, w)
            key = (u, v)
            if not self.directed and key not in merged and (v, u) in merged:
                key = (v, u)
            merged[key] = merged.get(key, 0.0) + w
        return [(u, v, w) for (u, v), w in merged.items()]

    def __contains__(self, vertex) -> bool:
        return vertex in self.index

    def __len__(self) -> int:
        return len(self.index)

    def vertices(self) -> List[Hashable]:
        return list(self.index)

    def neighbors(self, vertex) -> Iterator[Hashable]:
        """Neighbours of ``vertex`` (out-neighbours for directed graphs)."""
        return iter(self.graph.neighbors(vertex))

    def edge_weight(self, u, v) -> Optional[float]:
        """Weight of the edge u-v, or None when the vertices are not adjacent."""
        if (u, v) in self._weights:
            return self._weights[(u, v)]
        if not self.directed:
            return self._weights.get((v, u))
        return None

    def is_directed(self) -> bool:
        return self.directed

    def vertex_count(self) -> int:
        return len(self.index)

    def edge_count(self) -> int:
        return len(self._edges)

    def edges(self) -> List[Edge]:
        """All edges as (u, v, weight), in the wrapped graph's edge order."""
        return list(self._edges)

    def total_weight(self) -> float:
        return sum(w for _, _, w in self._edges)

    def adjacency(self) -> Dict[Hashable, Dict[Hashable, float]]:
        """
        Weighted adjacency snapshot.

        Out-adjacency for directed graphs, symmetric for undirected ones.
        Self-loops appear once under ``adjacency[v][v]``.
        """
        if not self.directed:
            return self.undirected_adjacency()
        adj: Dict[Hashable, Dict[Hashable, float]] = {v: {} for v in self.index}
        for u, v, w in self._edges:
            adj[u][v] = adj[u].get(v, 0.0) + w
        return adj

    def undirected_adjacency(self) -> Dict[Hashable, Dict[Hashable, float]]:
        """Symmetric adjacency; reciprocal arcs of a directed graph are summed."""
        adj: Dict[Hashable, Dict[Hashable, float]] = {v: {} for v in self.index}
        for u, v, w in self._edges:
            adj[u][v] = adj[u].get(v, 0.0) + w
            if u != v:
                adj[v][u] = adj[v].get(u, 0.0) + w
        return adj


def as_view(graph: Any, weight: str = "weight") -> GraphView:
    """
    Wrap ``graph`` in a GraphView unless it already is one.

    An existing view is returned as is; asking for a different weight
    attribute than the view was built with raises InvalidInputError.
    """
    if isinstance(graph, GraphView):
        if weight != graph.weight:
            raise InvalidInputError(
                f"graph view reads weights from {graph.weight!r}, not {weight!r}"
            )
        return graph
    if not isinstance(graph, nx.Graph):
        raise InvalidInputError(
            f"expected a networkx graph, got {type(graph).__name__}"
        )
    view = GraphView(graph, weight=weight)
    logger.debug(
        "graph view: %d vertices, %d edges, directed=%s",
        view.vertex_count(), view.edge_count(), view.directed,
    )
    return view


def _validate_weight(u, v, weight) -> float:
    if weight is None:
        return 1.0
    if isinstance(weight, bool) or not isinstance(weight, Real):
        raise InvalidInputError(f"edge ({u!r}, {v!r}) has non-numeric weight {weight!r}")
    weight = float(weight)
    if math.isnan(weight) or weight < 0:
        raise InvalidInputError(f"edge ({u!r}, {v!r}) has invalid weight {weight!r}")
    return weight
