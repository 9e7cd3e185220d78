"""Configuration loader module for YAML and environment variable loading."""

from __future__ import annotations

from .yaml_loader import YamlLoader
from .env_loader import EnvLoader
from .config_loader import ConfigLoader, discover_config_file
from ..exceptions import ConfigLoadError, EnvLoadError

__all__ = [
    "YamlLoader",
    "ConfigLoadError",
    "EnvLoader",
    "EnvLoadError",
    "ConfigLoader",
    "discover_config_file",
]
