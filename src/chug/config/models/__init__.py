"""Configuration models."""

from __future__ import annotations

from .main import (
    AppConfig,
    BaseConfig,
    DemoConfig,
    EstimatorConfig,
    LoggingConfig,
    LogLevelName,
)

__all__ = [
    "AppConfig",
    "BaseConfig",
    "DemoConfig",
    "EstimatorConfig",
    "LoggingConfig",
    "LogLevelName",
]
