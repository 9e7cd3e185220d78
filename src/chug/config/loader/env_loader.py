"""Environment variable configuration loader."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from typing import cast

from ..exceptions import EnvLoadError


class EnvLoader:
    """Load nested configuration from prefixed environment variables.

    ``CHUG_ESTIMATOR__WINDOW_CAPACITY=20`` becomes
    ``{"estimator": {"window_capacity": "20"}}``: the prefix is stripped, the
    rest is lower-cased, and ``__`` separates nesting levels so single
    underscores survive inside field names.
    """

    prefix: str
    separator: str
    parse_json: bool

    def __init__(
        self,
        prefix: str = "CHUG_",
        separator: str = "__",
        parse_json: bool = True,
    ) -> None:
        """Initialize EnvLoader.

        Args:
            prefix: Prefix for environment variables to load
            separator: Separator between nested field names
            parse_json: Whether to decode values that look like JSON lists or objects
        """
        if not separator:
            raise ValueError("Separator cannot be empty")

        self.prefix = prefix
        self.separator = separator
        self.parse_json = parse_json

    def load(self, environ: Mapping[str, str] | None = None) -> dict[str, object]:
        """Load configuration from environment variables.

        Args:
            environ: Mapping to read from (default: os.environ)

        Returns:
            Dictionary containing the loaded configuration

        Raises:
            EnvLoadError: If a variable cannot be converted or conflicts with
                another variable's nesting
        """
        source = os.environ if environ is None else environ
        config: dict[str, object] = {}

        for env_var in sorted(source):
            if not env_var.startswith(self.prefix):
                continue

            config_key = env_var[len(self.prefix):]
            if not config_key:
                continue

            path = [part for part in config_key.lower().split(self.separator) if part]
            if not path:
                continue

            raw_value = source[env_var]
            value: object = self._decode_value(raw_value, env_var) if self.parse_json else raw_value
            self._set_nested_value(config, path, value, env_var)

        return config

    def _decode_value(self, value: str, env_var: str) -> object:
        """Decode JSON lists and objects; leave every other value as a string.

        Scalars are coerced by the config models, which know each field's
        type. ``CHUG_LOGGING__FORMAT=123`` therefore stays the string ``"123"``.

        Raises:
            EnvLoadError: If a JSON-looking value fails to parse
        """
        stripped = value.strip()
        if not stripped.startswith(("[", "{")):
            return value

        try:
            return cast(object, json.loads(stripped))
        except json.JSONDecodeError as e:
            raise EnvLoadError(f"Failed to parse JSON for {env_var}: {e}", env_var) from e

    def _set_nested_value(
        self,
        config: dict[str, object],
        path: list[str],
        value: object,
        env_var: str,
    ) -> None:
        current = config
        for key in path[:-1]:
            child = current.setdefault(key, {})
            if not isinstance(child, dict):
                raise EnvLoadError(
                    f"{env_var} nests under '{key}', which is already set to a scalar",
                    env_var,
                )
            current = cast(dict[str, object], child)

        leaf = path[-1]
        if isinstance(current.get(leaf), dict):
            raise EnvLoadError(f"{env_var} would replace the nested section '{leaf}'", env_var)
        current[leaf] = value
