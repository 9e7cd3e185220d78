"""Errors raised while assembling chug's configuration.

Every error records the ``source`` of the offending value when it is known:
a file path, an environment variable name, or a dotted key path. The
command line prints the error followed by :meth:`ConfigError.hint`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import NamedTuple, override

from pydantic import ValidationError

logger = logging.getLogger(__name__)


class FieldProblem(NamedTuple):
    """A single rejected configuration value."""

    field: str
    message: str


class ConfigError(Exception):
    """Base class for configuration failures."""

    source: str | None

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source

    def hint(self) -> str | None:
        """Return a one-line suggestion for fixing the error, if there is one."""
        return None


class ConfigLoadError(ConfigError):
    """A configuration file could not be read or does not hold a mapping."""

    @override
    def hint(self) -> str:
        target = self.source or "the configuration file"
        return f"Check that {target} exists and contains a YAML mapping"


class EnvLoadError(ConfigError):
    """A ``CHUG_`` environment variable could not be interpreted."""

    @override
    def hint(self) -> str:
        if self.source:
            return f"Check the value of {self.source}"
        return "Check the CHUG_ environment variables"


class ConfigMergeError(ConfigError):
    """Two sources disagree on whether a key is a section or a value."""

    @override
    def hint(self) -> str:
        if self.source:
            return f"Use '{self.source}' consistently as either a section or a value"
        return "Make every configuration source a mapping"


class ConfigValidationError(ConfigError):
    """The merged configuration was rejected by the models."""

    problems: tuple[FieldProblem, ...]

    def __init__(self, message: str, problems: Iterable[FieldProblem] = ()) -> None:
        super().__init__(message)
        self.problems = tuple(problems)

    @classmethod
    def from_pydantic(
        cls,
        error: ValidationError,
        message: str = "Configuration validation failed",
    ) -> ConfigValidationError:
        """Collect the field paths and messages of a pydantic error."""
        problems = [
            FieldProblem(".".join(str(part) for part in detail["loc"]), detail["msg"])
            for detail in error.errors()
        ]
        return cls(message, problems)

    @override
    def hint(self) -> str | None:
        if not self.problems:
            return None
        if len(self.problems) == 1:
            field, message = self.problems[0]
            return f"Fix '{field}': {message}"
        listed = "; ".join(f"'{field}': {message}" for field, message in self.problems)
        return f"Fix {len(self.problems)} values: {listed}"


def as_config_error(error: Exception, operation: str) -> ConfigError:
    """Express a failure that happened while ``operation`` ran as a ConfigError.

    ConfigErrors pass through untouched. Anything else is wrapped with the
    original exception kept as ``__cause__``.
    """
    if isinstance(error, ConfigError):
        return error

    logger.debug("Unexpected failure while %s", operation, exc_info=error)
    if isinstance(error, ValidationError):
        wrapped: ConfigError = ConfigValidationError.from_pydantic(error)
    else:
        wrapped = ConfigError(f"Unexpected {type(error).__name__} while {operation}: {error}")
    wrapped.__cause__ = error
    return wrapped
