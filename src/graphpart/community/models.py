"""Community detection results: CommunityResult, DendrogramNode."""

from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class CommunityResult(BaseModel):
    """Flat partition produced by the modularity optimizer."""

    model_config = ConfigDict(frozen=True)

    communities: List[List[Any]] = Field(default_factory=list)
    modularity: float = 0.0
    iterations: int = 0


class DendrogramNode(BaseModel):
    """One step of the divisive partitioner.

    ``communities`` always covers every vertex; ``reported_communities`` drops
    communities smaller than the requested minimum size.
    """

    model_config = ConfigDict(frozen=True)

    step: int
    communities: List[List[Any]] = Field(default_factory=list)
    reported_communities: List[List[Any]] = Field(default_factory=list)
    modularity: float = 0.0
    removed_edge: Optional[Tuple[Any, Any]] = None

    @property
    def num_communities(self) -> int:
        return len(self.communities)
