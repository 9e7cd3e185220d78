"""Configuration management for the chug command line."""

from __future__ import annotations

from .exceptions import (
    ConfigError,
    ConfigLoadError,
    ConfigMergeError,
    ConfigValidationError,
    EnvLoadError,
    FieldProblem,
    as_config_error,
)
from .loader import ConfigLoader, EnvLoader, YamlLoader, discover_config_file
from .manager import ConfigMerger
from .models import AppConfig, DemoConfig, EstimatorConfig, LoggingConfig

__all__ = [
    # Exception classes
    "ConfigError",
    "ConfigLoadError",
    "ConfigMergeError",
    "ConfigValidationError",
    "EnvLoadError",
    "FieldProblem",
    # Utility functions
    "as_config_error",
    # Loading
    "ConfigLoader",
    "ConfigMerger",
    "EnvLoader",
    "YamlLoader",
    "discover_config_file",
    # Models
    "AppConfig",
    "DemoConfig",
    "EstimatorConfig",
    "LoggingConfig",
]
