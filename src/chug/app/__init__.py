"""Application module for the chug command line."""

from __future__ import annotations

from chug.app.cli import cli
from chug.app.runner import DemoRunner, StreamTracker

__all__ = [
    "cli",
    "DemoRunner",
    "StreamTracker",
]
