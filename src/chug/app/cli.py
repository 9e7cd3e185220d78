"""Command-line interface for chug."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from chug.config.exceptions import ConfigError
from chug.config.loader.config_loader import ConfigLoader, discover_config_file
from chug.config.models.main import AppConfig
from chug.core.progress import ProgressEstimator
from chug.utils.logging import VALID_LOG_LEVELS, configure_logging

logger = logging.getLogger(__name__)


def validate_config_path(
    ctx: click.Context,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    param: click.Parameter,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    value: Path | None,
) -> Path | None:
    """Validate configuration file path.

    Raises:
        click.BadParameter: If the path is a directory or not a YAML file
    """
    if value is None:
        return value

    if value.exists() and value.is_dir():
        raise click.BadParameter("Configuration path must be a file, not a directory")

    valid_extensions = {".yaml", ".yml"}
    if value.suffix.lower() not in valid_extensions:
        extensions_str = ", ".join(sorted(valid_extensions))
        raise click.BadParameter(
            f"Invalid configuration file extension. Supported extensions: {extensions_str}"
        )

    return value


def validate_log_level(
    ctx: click.Context,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    param: click.Parameter,  # pyright: ignore[reportUnusedParameter] # required by Click callback signature
    value: str | None,
) -> str | None:
    """Validate and normalize log level.

    Raises:
        click.BadParameter: If the level name is unknown
    """
    if value is None:
        return value

    normalized_value = value.upper().strip()
    if normalized_value not in VALID_LOG_LEVELS:
        raise click.BadParameter(
            f'Invalid log level "{value}". Valid options: {", ".join(sorted(VALID_LOG_LEVELS))}'
        )

    return normalized_value


def load_app_config(
    config_path: Path | None,
    overrides: dict[str, object],
) -> AppConfig:
    """Load configuration, turning configuration errors into Click errors.

    Raises:
        click.ClickException: If configuration cannot be loaded or validated
    """
    try:
        return ConfigLoader().load(config_path, overrides=overrides)
    except ConfigError as e:
        message = str(e)
        suggestion = e.hint()
        if suggestion:
            message = f"{message}\n{suggestion}"
        raise click.ClickException(message) from e


def _estimator_from(config: AppConfig) -> ProgressEstimator:
    return ProgressEstimator(config.estimator.window_capacity, config.estimator.total)


# Import version from package
try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("chug")
except PackageNotFoundError:
    __version__ = "unknown"


@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(path_type=Path),
    default=None,
    callback=validate_config_path,
    help="Configuration file path (.yaml or .yml). If not specified, searches ./chug.yaml and ~/.chug.yaml.",
)
@click.option(
    "--log-level", "-l",
    type=str,
    default=None,
    callback=validate_log_level,
    help="Diagnostic logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
)
@click.version_option(version=__version__, prog_name="chug")
@click.pass_context
def cli(ctx: click.Context, config: Path | None, log_level: str | None) -> None:
    """chug - estimate time remaining for unit-counted work.

    Examples:

        # Watch a simulated 100-unit job
        chug demo --total 100 --interval-ms 50

        # One unit per line of input
        find . -name '*.csv' | xargs -n1 process | chug track --total 250
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config if config is not None else discover_config_file()
    ctx.obj["log_level"] = log_level


def _prepare(ctx: click.Context, overrides: dict[str, object]) -> AppConfig:
    obj: dict[str, object] = ctx.ensure_object(dict)
    config_path = obj.get("config_path")
    log_level = obj.get("log_level")

    if log_level is not None:
        overrides["logging"] = {"level": log_level}

    app_config = load_app_config(
        config_path if isinstance(config_path, Path) else None,
        overrides,
    )
    _ = configure_logging(
        log_level=app_config.logging.level,
        log_format=app_config.logging.format,
    )
    logger.debug("Effective configuration: %s", app_config.model_dump())
    return app_config


@cli.command()
@click.option("--total", "-t", type=click.IntRange(min=0), default=None, help="Total units of work")
@click.option("--window", "-w", type=click.IntRange(min=0), default=None, help="Number of recent ticks to average")
@click.option("--interval-ms", "-i", type=click.IntRange(min=0), default=None, help="Simulated work per unit in milliseconds")
@click.pass_context
def demo(ctx: click.Context, total: int | None, window: int | None, interval_ms: int | None) -> None:
    """Simulate a job and print the ETA before every unit."""
    from chug.app.runner import DemoRunner

    app_config = _prepare(
        ctx,
        {
            "estimator": {"total": total, "window_capacity": window},
            "demo": {"interval_ms": interval_ms},
        },
    )

    runner = DemoRunner(
        _estimator_from(app_config),
        app_config.demo.interval_ms,
        echo=click.echo,
    )
    try:
        _ = runner.run()
    except KeyboardInterrupt:
        click.echo("\nStopped.", err=True)


@cli.command()
@click.option(
    "--total", "-t",
    type=click.IntRange(min=0),
    default=None,
    help="Total units of work (lines expected). Required unless set in the configuration.",
)
@click.option("--window", "-w", type=click.IntRange(min=0), default=None, help="Number of recent ticks to average")
@click.option("--echo/--no-echo", default=False, help="Copy each input line to stdout")
@click.option("--human", is_flag=True, help="Show the ETA as e.g. '1m 30s'")
@click.pass_context
def track(ctx: click.Context, total: int | None, window: int | None, echo: bool, human: bool) -> None:
    """Count lines on stdin as completed units and report the ETA on stderr."""
    from chug.app.runner import StreamTracker

    app_config = _prepare(
        ctx,
        {"estimator": {"total": total, "window_capacity": window}},
    )
    # The model default of 100 is not an expected line count
    if "total" not in app_config.estimator.model_fields_set:
        raise click.UsageError(
            "Missing total: pass --total or set estimator.total in the configuration",
            ctx=ctx,
        )

    tracker = StreamTracker(
        _estimator_from(app_config),
        echo_input=echo,
        human=human,
        output_stream=click.get_text_stream("stdout"),
        status_stream=click.get_text_stream("stderr"),
    )
    try:
        consumed = tracker.track(click.get_text_stream("stdin"))
    except KeyboardInterrupt:
        click.echo("\nStopped.", err=True)
        return

    logger.info("Consumed %d lines", consumed)
