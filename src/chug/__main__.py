"""Entry point for ``python -m chug``."""

from __future__ import annotations

from chug.app.cli import cli

__all__ = ["main"]


def main() -> None:
    """Run the chug command line."""
    cli(prog_name="chug")


if __name__ == "__main__":
    main()
