"""YAML configuration loader."""

from __future__ import annotations

from pathlib import Path

import yaml

from ..exceptions import ConfigLoadError


class YamlLoader:
    """Loader for YAML configuration files."""

    def load(self, path: Path) -> dict[str, object]:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file

        Returns:
            Parsed configuration as a dictionary; empty for an empty file

        Raises:
            ConfigLoadError: If the file cannot be read, cannot be parsed, or
                its top level is not a mapping
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                content = yaml.safe_load(f)  # pyright: ignore[reportAny] # yaml.safe_load returns Any
        except (OSError, yaml.YAMLError) as e:
            raise ConfigLoadError(f"Failed to load {path}: {e}", str(path)) from e

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ConfigLoadError(
                f"Top level of {path} must be a mapping, got {type(content).__name__}",  # pyright: ignore[reportAny]
                str(path),
            )
        return content  # pyright: ignore[reportUnknownVariableType] # content is dict after isinstance check
