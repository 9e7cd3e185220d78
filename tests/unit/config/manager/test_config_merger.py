"""Tests for configuration merging."""

from __future__ import annotations

import pytest

from chug.config.exceptions import ConfigMergeError
from chug.config.manager.config_merger import ConfigMerger


class TestConfigMerger:
    """Test suite for ConfigMerger."""

    def test_override_wins(self) -> None:
        """Test scalar values in the override replace base values."""
        result = ConfigMerger().merge(
            {"estimator": {"total": 10, "window_capacity": 3}},
            {"estimator": {"total": 20}},
        )

        assert result == {"estimator": {"total": 20, "window_capacity": 3}}

    def test_none_means_not_set(self) -> None:
        """Test None in the override leaves the base value alone."""
        result = ConfigMerger().merge(
            {"estimator": {"total": 10}},
            {"estimator": {"total": None, "window_capacity": None}},
        )

        assert result == {"estimator": {"total": 10}}

    def test_inputs_not_modified(self) -> None:
        """Test merging copies rather than mutating."""
        base: dict[str, object] = {"demo": {"interval_ms": 1}}
        override: dict[str, object] = {"demo": {"interval_ms": 2}}

        _ = ConfigMerger().merge(base, override)

        assert base == {"demo": {"interval_ms": 1}}
        assert override == {"demo": {"interval_ms": 2}}

    def test_new_section_added(self) -> None:
        result = ConfigMerger().merge({}, {"logging": {"level": "INFO"}})

        assert result == {"logging": {"level": "INFO"}}

    def test_new_section_drops_unset_values(self) -> None:
        """Test None entries are dropped from a section the base lacks."""
        result = ConfigMerger().merge({}, {"estimator": {"total": None, "window_capacity": 4}})

        assert result == {"estimator": {"window_capacity": 4}}

    def test_merge_multiple_precedence(self) -> None:
        """Test later sources take precedence."""
        result = ConfigMerger().merge_multiple(
            [
                {"estimator": {"total": 1, "window_capacity": 1}},
                {"estimator": {"total": 2}},
                {"estimator": {"window_capacity": 3}},
            ]
        )

        assert result == {"estimator": {"total": 2, "window_capacity": 3}}

    def test_merge_multiple_empty(self) -> None:
        assert ConfigMerger().merge_multiple([]) == {}

    def test_section_over_scalar_raises(self) -> None:
        """Test a mapping cannot replace a scalar."""
        with pytest.raises(ConfigMergeError) as exc_info:
            _ = ConfigMerger().merge({"estimator": 5}, {"estimator": {"total": 1}})

        assert exc_info.value.source == "estimator"

    def test_scalar_over_section_raises(self) -> None:
        """Test a scalar cannot replace a mapping."""
        with pytest.raises(ConfigMergeError) as exc_info:
            _ = ConfigMerger().merge({"estimator": {"total": 1}}, {"estimator": 5})

        assert exc_info.value.source == "estimator"

    def test_non_mapping_inputs_raise(self) -> None:
        with pytest.raises(ConfigMergeError, match="Base configuration"):
            _ = ConfigMerger().merge([], {})
        with pytest.raises(ConfigMergeError, match="Override configuration"):
            _ = ConfigMerger().merge({}, "x")
