"""Minimum cut and maximum flow results."""

from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field


class CutResult(BaseModel):
    """Two-way partition and the edges crossing it.

    ``cut_value`` is the summed weight of ``cut_edges``; each cut edge is
    ``(u, v, weight)`` with ``u`` in ``partition1`` and ``v`` in ``partition2``.
    """

    model_config = ConfigDict(frozen=True)

    partition1: List[Any] = Field(default_factory=list)
    partition2: List[Any] = Field(default_factory=list)
    cut_edges: List[Tuple[Any, Any, float]] = Field(default_factory=list)
    cut_value: float = 0.0


class MaxFlowResult(BaseModel):
    """Maximum flow between two terminals and the residual reachability split."""

    model_config = ConfigDict(frozen=True)

    flow_value: float = 0.0
    flow: Dict[Any, Dict[Any, float]] = Field(default_factory=dict)
    source_side: List[Any] = Field(default_factory=list)
    sink_side: List[Any] = Field(default_factory=list)
