"""Configuration models for the estimator and the command line."""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from chug.utils.logging import DEFAULT_LOG_FORMAT

LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class BaseConfig(BaseModel):
    """Base configuration model: unknown keys are rejected, assignments validated."""

    model_config: ConfigDict = ConfigDict(  # pyright: ignore[reportIncompatibleVariableOverride]
        extra="forbid",
        validate_assignment=True,
        str_strip_whitespace=True,
        validate_default=True,
    )


class EstimatorConfig(BaseConfig):
    """Construction parameters for a ProgressEstimator."""

    window_capacity: int = Field(
        default=10,
        ge=0,
        description="Number of most recent ticks averaged for the estimate",
    )
    total: int = Field(
        default=100,
        ge=0,
        description="Total number of units of work",
    )


class DemoConfig(BaseConfig):
    """Settings for the simulated tick loop."""

    interval_ms: int = Field(
        default=50,
        ge=0,
        le=3_600_000,
        description="Simulated work time per unit in milliseconds",
    )


class LoggingConfig(BaseConfig):
    """Diagnostic logging settings."""

    level: LogLevelName = Field(
        default="WARNING",
        description="Log level for chug's own diagnostics",
    )
    format: str = Field(
        default=DEFAULT_LOG_FORMAT,
        min_length=1,
        description="logging.Formatter format string",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        """Accept level names in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Reject format strings that logging.Formatter cannot use."""
        try:
            _ = logging.Formatter(v, validate=True)
        except ValueError as e:
            raise ValueError(f"Invalid log format: {e}") from e
        return v


class AppConfig(BaseConfig):
    """Complete application configuration."""

    estimator: EstimatorConfig = Field(default_factory=EstimatorConfig)
    demo: DemoConfig = Field(default_factory=DemoConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
