"""
Karger's randomized global minimum cut.

One trial contracts uniformly-random edges (probability proportional to
weight) until two super-vertices remain; the best of ``trials`` runs is
returned. A trial sorts edges by exponential clocks Exp(weight) and unions
them in that order, which draws the same contraction sequence as repeatedly
picking a weighted random edge among those not yet inside a super-vertex.

Per-trial random streams are spawned from one numpy SeedSequence, so a fixed
seed reproduces the result whatever the number of worker processes.
"""

import logging
import multiprocessing
from functools import partial
from typing import Hashable, Iterable, List, Optional, Sequence, Tuple, Union

import networkx as nx
import numpy as np
from tqdm import tqdm

from ..errors import InvalidInputError, UnsupportedGraphShapeError
from ..graph.utils import UnionFind
from ..graph.view import Edge, as_view
from .cut import build_cut_result
from .models import CutResult

logger = logging.getLogger(__name__)

SeedLike = Union[int, np.random.Generator, np.random.SeedSequence, None]


def _trial_seeds(seed: SeedLike, trials: int) -> List[np.random.SeedSequence]:
    if isinstance(seed, np.random.Generator):
        seed = int(seed.integers(2 ** 63))
    if isinstance(seed, np.random.SeedSequence):
        root = seed
    elif seed is None or (isinstance(seed, (int, np.integer)) and not isinstance(seed, bool)):
        root = np.random.SeedSequence(seed)
    else:
        raise InvalidInputError(f"seed must be an int, numpy Generator or SeedSequence, got {seed!r}")
    return root.spawn(trials)


def _contract_trial(seed_seq: np.random.SeedSequence, nodes: Sequence[Hashable],
                    edges: Sequence[Edge]) -> Tuple[float, List[Hashable]]:
    """
    Single contraction run.

    Returns:
        (cut value, vertices of the super-vertex holding the first vertex)
    """
    rng = np.random.default_rng(seed_seq)
    uf = UnionFind(nodes)

    if edges:
        weights = np.array([w for _, _, w in edges], dtype=float)
        # Zero-weight edges get an infinite clock and are contracted last
        with np.errstate(divide='ignore', invalid='ignore'):
            clocks = rng.exponential(size=len(edges)) / weights
        for i in np.argsort(clocks, kind='stable'):
            if uf.count <= 2:
                break
            u, v, _ = edges[i]
            uf.union(u, v)

    # More than two groups remain only when the graph is disconnected
    side = set(uf.groups()[0])
    cut_value = sum(w for u, v, w in edges if (u in side) != (v in side))
    return cut_value, [v for v in nodes if v in side]


def _best_of(results: Iterable[Tuple[float, List[Hashable]]], trials: int,
             show_progress: bool) -> List[Hashable]:
    """Side of the smallest cut; the earliest trial wins ties."""
    best_value: Optional[float] = None
    best_side: List[Hashable] = []
    for cut_value, side in tqdm(results, total=trials, desc="Karger trials",
                                disable=not show_progress):
        if best_value is None or cut_value < best_value:
            best_value, best_side = cut_value, side
    return best_side


def karger_min_cut(graph: nx.Graph, trials: int = 100, seed: SeedLike = None,
                   n_jobs: int = 1, show_progress: bool = False,
                   weight: str = 'weight') -> CutResult:
    """
    Approximate global minimum cut by repeated random contraction.

    Args:
        graph: Undirected networkx graph
        trials: Number of independent contraction runs (best one is kept)
        seed: int, numpy Generator or SeedSequence for reproducible runs;
            None draws fresh OS entropy
        n_jobs: Worker processes for the trials (1 runs in-process)
        show_progress: Display a tqdm progress bar over trials
        weight: Edge attribute holding the weight

    Returns:
        The smallest cut found; the earliest trial wins ties

    Raises:
        InvalidInputError: If trials or n_jobs is not a positive integer
        UnsupportedGraphShapeError: If the graph is directed
    """
    if isinstance(trials, bool) or not isinstance(trials, int) or trials <= 0:
        raise InvalidInputError(f"trials must be a positive integer, got {trials!r}")
    if isinstance(n_jobs, bool) or not isinstance(n_jobs, int) or n_jobs <= 0:
        raise InvalidInputError(f"n_jobs must be a positive integer, got {n_jobs!r}")
    seeds = _trial_seeds(seed, trials)

    view = as_view(graph, weight)
    if view.directed:
        raise UnsupportedGraphShapeError('karger_min_cut')

    nodes = view.vertices()
    if len(nodes) < 2:
        return CutResult(partition1=nodes, partition2=[], cut_edges=[], cut_value=0.0)

    edges = [(u, v, w) for u, v, w in view.edges() if u != v]
    worker = partial(_contract_trial, nodes=nodes, edges=edges)

    if n_jobs == 1:
        best_side = _best_of(map(worker, seeds), trials, show_progress)
    else:
        num_cores = min(n_jobs, multiprocessing.cpu_count())
        logger.debug("Using %d processes for %d trials", num_cores, trials)
        with multiprocessing.Pool(num_cores) as pool:
            # imap keeps trial order so ties resolve the same way as in-process
            best_side = _best_of(pool.imap(worker, seeds), trials, show_progress)

    result = build_cut_result(view, set(best_side))
    logger.info("karger_min_cut: %d trials, best cut %s", trials, result.cut_value)
    return result
