"""
Option models for the community detection algorithms.

Options are frozen pydantic models. Every public entry point accepts a model
instance, a plain dict, or keyword overrides and funnels them through
``resolve_options`` so that validation failures surface as InvalidInputError
before any computation starts.
"""

from typing import Any, Dict, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import InvalidInputError

OptionsT = TypeVar("OptionsT", bound="AlgorithmOptions")


class AlgorithmOptions(BaseModel):
    """Common settings for all option models."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class ModularityOptions(AlgorithmOptions):
    """Settings for the Louvain-style modularity optimizer."""

    resolution: float = Field(1.0, ge=0.0)
    max_iterations: int = Field(100, ge=0)
    tolerance: float = Field(1e-6, ge=0.0)
    prune_leaves: bool = True
    importance_ordering: bool = True
    pruning_threshold: float = Field(0.01, ge=0.0)
    threshold_cycling: bool = True


class DivisiveOptions(AlgorithmOptions):
    """Settings for the betweenness-driven divisive partitioner."""

    max_communities: Optional[int] = Field(None, ge=1)
    min_community_size: int = Field(1, ge=1)
    max_steps: Optional[int] = Field(None, ge=0)
    weighted: bool = False
    show_progress: bool = False


def resolve_options(
    model: Type[OptionsT],
    options: Union[OptionsT, Dict[str, Any], None] = None,
    **overrides: Any,
) -> OptionsT:
    """
    Build a validated options model from an instance, a dict and keyword overrides.

    Args:
        model: Option model class to build
        options: Existing model instance, mapping of field values, or None
        **overrides: Field values that take precedence over ``options``

    Returns:
        A frozen instance of ``model``

    Raises:
        InvalidInputError: If a value is out of range or a field is unknown
    """
    if options is None:
        values: Dict[str, Any] = {}
    elif isinstance(options, model):
        values = options.model_dump()
    elif isinstance(options, dict):
        values = dict(options)
    else:
        raise InvalidInputError(
            f"options must be a {model.__name__} or a dict, got {type(options).__name__}"
        )
    values.update(overrides)

    try:
        return model(**values)
    except ValidationError as exc:
        raise InvalidInputError(f"invalid {model.__name__}: {exc}") from exc
