"""Configuration merging for combining multiple configuration sources."""

from __future__ import annotations

import copy
from collections.abc import Mapping, Sequence
from typing import Any, cast

from ..exceptions import ConfigMergeError

ConfigDict = dict[str, Any]  # pyright: ignore[reportExplicitAny] # Config systems need flexible types


class ConfigMerger:
    """Deep-merge configuration dictionaries, later sources taking precedence.

    Nested mappings are merged key by key; any other value in the override
    replaces the base value outright. A mapping may not replace a scalar (or
    the reverse) because that almost always means a mistyped key. A None
    value in an override means "not set" and leaves the base value alone.
    """

    def merge(self, base: object, override: object) -> ConfigDict:
        """Merge two configuration dictionaries with override precedence.

        Args:
            base: Base configuration dictionary
            override: Override configuration dictionary (takes precedence)

        Returns:
            New merged dictionary; neither input is modified

        Raises:
            ConfigMergeError: If either input is not a mapping or the two
                disagree about whether a key holds a section
        """
        if not isinstance(base, Mapping):
            raise ConfigMergeError("Base configuration must be a dictionary")
        if not isinstance(override, Mapping):
            raise ConfigMergeError("Override configuration must be a dictionary")

        result = cast(ConfigDict, copy.deepcopy(dict(cast(Mapping[str, object], base))))
        self._deep_merge(result, cast(Mapping[str, object], override), "")
        return result

    def merge_multiple(self, sources: Sequence[object]) -> ConfigDict:
        """Merge sources left to right; later sources take precedence."""
        result: ConfigDict = {}
        for source in sources:
            result = self.merge(result, source)
        return result

    def _deep_merge(self, target: ConfigDict, override: Mapping[str, object], path: str) -> None:
        for key, value in override.items():
            current_path = f"{path}.{key}" if path else key
            existing = target.get(key)

            if isinstance(value, Mapping):
                if key not in target or existing is None:
                    section: ConfigDict = {}
                    self._deep_merge(section, cast(Mapping[str, object], value), current_path)
                    target[key] = section
                elif isinstance(existing, dict):
                    self._deep_merge(cast(ConfigDict, existing), cast(Mapping[str, object], value), current_path)
                else:
                    raise ConfigMergeError(
                        f"Cannot merge a section into scalar value at {current_path}",
                        current_path,
                    )
            elif isinstance(existing, dict) and value is not None:
                raise ConfigMergeError(
                    f"Cannot replace section {current_path} with a scalar value",
                    current_path,
                )
            elif value is not None:
                target[key] = copy.deepcopy(value)
