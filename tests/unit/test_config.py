"""Tests for config.py: option models and resolution."""

import pydantic
import pytest

from graphpart.config import DivisiveOptions, ModularityOptions, resolve_options
from graphpart.errors import GraphPartitionError, InvalidInputError


class TestResolveOptions:
    def test_defaults(self):
        opts = resolve_options(ModularityOptions)
        assert opts.resolution == 1.0
        assert opts.max_iterations == 100
        assert opts.tolerance == 1e-6
        assert opts.prune_leaves is True
        assert opts.importance_ordering is True
        assert opts.pruning_threshold == 0.01
        assert opts.threshold_cycling is True

    def test_dict_and_overrides(self):
        opts = resolve_options(ModularityOptions, {"resolution": 2.0, "max_iterations": 5},
                               max_iterations=7)
        assert opts.resolution == 2.0
        assert opts.max_iterations == 7

    def test_model_instance(self):
        base = DivisiveOptions(max_communities=3)
        opts = resolve_options(DivisiveOptions, base, min_community_size=2)
        assert opts.max_communities == 3
        assert opts.min_community_size == 2

    @pytest.mark.parametrize("values", [
        {"resolution": -1.0},
        {"max_iterations": -1},
        {"tolerance": -0.1},
        {"unknown_option": True},
    ])
    def test_invalid_modularity_options(self, values):
        with pytest.raises(InvalidInputError):
            resolve_options(ModularityOptions, values)

    @pytest.mark.parametrize("values", [
        {"max_communities": 0},
        {"min_community_size": 0},
        {"max_steps": -2},
    ])
    def test_invalid_divisive_options(self, values):
        with pytest.raises(InvalidInputError):
            resolve_options(DivisiveOptions, values)

    def test_wrong_container_type(self):
        with pytest.raises(InvalidInputError):
            resolve_options(ModularityOptions, [("resolution", 1.0)])

    def test_error_hierarchy(self):
        with pytest.raises(GraphPartitionError):
            resolve_options(ModularityOptions, resolution="high")
        with pytest.raises(ValueError):
            resolve_options(ModularityOptions, resolution="high")

    def test_options_are_frozen(self):
        opts = ModularityOptions()
        with pytest.raises(pydantic.ValidationError):
            opts.resolution = 3.0
