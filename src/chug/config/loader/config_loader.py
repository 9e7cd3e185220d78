"""Configuration loader combining defaults, YAML file, environment and CLI overrides."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from pydantic import ValidationError

from ..exceptions import ConfigError, ConfigValidationError, as_config_error
from ..manager.config_merger import ConfigMerger
from ..models.main import AppConfig
from .env_loader import EnvLoader
from .yaml_loader import YamlLoader

logger = logging.getLogger(__name__)

# Configuration file discovery, in order of precedence
CURRENT_DIR_CONFIG_FILES = [
    "chug.yaml",
    "chug.yml",
]

HOME_CONFIG_FILES = [
    ".chug.yaml",
    ".chug.yml",
]


def discover_config_file(cwd: Path | None = None, home: Path | None = None) -> Path | None:
    """Find a configuration file in the standard locations.

    Searches the working directory first, then the user's home directory.

    Args:
        cwd: Directory to treat as the working directory (default: Path.cwd())
        home: Directory to treat as home (default: Path.home())

    Returns:
        Path to the first configuration file found, or None
    """
    base_dir = cwd if cwd is not None else Path.cwd()
    for config_file in CURRENT_DIR_CONFIG_FILES:
        config_path = base_dir / config_file
        if config_path.is_file():
            return config_path

    try:
        home_dir = home if home is not None else Path.home()
    except (OSError, RuntimeError):
        # Path.home() can fail in some environments
        return None

    for config_file in HOME_CONFIG_FILES:
        config_path = home_dir / config_file
        if config_path.is_file():
            return config_path

    return None


class ConfigLoader:
    """Build a validated AppConfig from every configuration source.

    Precedence, lowest to highest: model defaults, YAML file, ``CHUG_``
    environment variables, explicit overrides (normally CLI options).
    """

    yaml_loader: YamlLoader
    env_loader: EnvLoader
    merger: ConfigMerger

    def __init__(self, env_loader: EnvLoader | None = None) -> None:
        self.yaml_loader = YamlLoader()
        self.env_loader = env_loader or EnvLoader()
        self.merger = ConfigMerger()

    def load(
        self,
        config_path: Path | None = None,
        overrides: Mapping[str, object] | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> AppConfig:
        """Load and validate the complete configuration.

        Args:
            config_path: YAML file to read; None skips the file layer
            overrides: Highest-precedence values, None entries ignored
            environ: Environment mapping (default: os.environ)

        Returns:
            Validated application configuration

        Raises:
            ConfigError: If any source fails to load, merge or validate
        """
        sources: list[object] = []

        try:
            if config_path is not None:
                logger.debug("Loading configuration file %s", config_path)
                sources.append(self.yaml_loader.load(config_path))

            sources.append(self.env_loader.load(environ))

            if overrides:
                sources.append(dict(overrides))

            merged = self.merger.merge_multiple(sources)
        except ConfigError:
            raise
        except Exception as e:
            raise as_config_error(e, "loading configuration") from e

        try:
            return AppConfig.model_validate(merged)
        except ValidationError as e:
            raise ConfigValidationError.from_pydantic(e) from e
