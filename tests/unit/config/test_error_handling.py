"""Tests for configuration error handling."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from chug.config.exceptions import (
    ConfigError,
    ConfigLoadError,
    ConfigMergeError,
    ConfigValidationError,
    EnvLoadError,
    FieldProblem,
    as_config_error,
)
from chug.config.models import EstimatorConfig


def _validation_error(data: dict[str, object]) -> ValidationError:
    try:
        _ = EstimatorConfig.model_validate(data)
    except ValidationError as e:
        return e
    raise AssertionError("expected validation to fail")


class TestConfigError:
    """Test suite for the configuration exception classes."""

    def test_source_defaults_to_none(self) -> None:
        error = ConfigError("boom")

        assert error.source is None
        assert error.hint() is None

    def test_subclasses_are_config_errors(self) -> None:
        for error in (
            ConfigLoadError("x", "a.yaml"),
            EnvLoadError("x", "CHUG_X"),
            ConfigMergeError("x", "estimator"),
            ConfigValidationError("x"),
        ):
            assert isinstance(error, ConfigError)

    @pytest.mark.parametrize(
        ("error", "fragment"),
        [
            (ConfigLoadError("x", "chug.yaml"), "Check that chug.yaml exists"),
            (ConfigLoadError("x"), "the configuration file"),
            (EnvLoadError("x", "CHUG_X"), "CHUG_X"),
            (EnvLoadError("x"), "CHUG_ environment variables"),
            (ConfigMergeError("x", "estimator.total"), "'estimator.total'"),
            (ConfigMergeError("x"), "mapping"),
        ],
    )
    def test_hint_names_the_source(self, error: ConfigError, fragment: str) -> None:
        hint = error.hint()

        assert hint is not None
        assert fragment in hint


class TestConfigValidationError:
    """Test suite for ConfigValidationError."""

    def test_from_pydantic_collects_field_paths(self) -> None:
        error = ConfigValidationError.from_pydantic(_validation_error({"total": -1}))

        assert str(error) == "Configuration validation failed"
        assert error.problems == (FieldProblem("total", error.problems[0].message),)
        assert "greater than or equal to 0" in error.problems[0].message

    def test_single_problem_hint(self) -> None:
        error = ConfigValidationError("invalid", [FieldProblem("estimator.total", "too small")])

        assert error.hint() == "Fix 'estimator.total': too small"

    def test_several_problems_listed(self) -> None:
        error = ConfigValidationError.from_pydantic(
            _validation_error({"total": -1, "window_capacity": -1})
        )

        hint = error.hint()

        assert hint is not None
        assert hint.startswith("Fix 2 values:")
        assert "'total'" in hint
        assert "'window_capacity'" in hint

    def test_no_problems_no_hint(self) -> None:
        assert ConfigValidationError("invalid").hint() is None


class TestAsConfigError:
    """Test suite for as_config_error."""

    def test_config_error_returned_unchanged(self) -> None:
        original = EnvLoadError("bad", "CHUG_X")

        assert as_config_error(original, "loading") is original

    def test_validation_error_wrapped(self) -> None:
        original = _validation_error({"window_capacity": -2})

        wrapped = as_config_error(original, "loading")

        assert isinstance(wrapped, ConfigValidationError)
        assert [problem.field for problem in wrapped.problems] == ["window_capacity"]
        assert wrapped.__cause__ is original

    def test_other_error_wrapped(self) -> None:
        original = RuntimeError("disk on fire")

        wrapped = as_config_error(original, "loading configuration")

        assert type(wrapped) is ConfigError
        assert str(wrapped) == "Unexpected RuntimeError while loading configuration: disk on fire"
        assert wrapped.__cause__ is original
