"""Configuration manager module for merging configuration sources."""

from __future__ import annotations

from .config_merger import ConfigDict, ConfigMerger

__all__ = [
    "ConfigDict",
    "ConfigMerger",
]
