"""Command-line interface (Typer-based).

Usage::

    lightning-time                   # current time, e.g. 8~0~0|00
    lightning-time colors [TIME]     # #80a100,#3200d6,#f68500
    lightning-time from 12:00:13.5   # 8~0~0|a3
    lightning-time to 8~0~0|a        # 12:00:13.183593750

Results go to stdout; logs and errors go to stderr.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Annotated, get_args

import typer
from pydantic import ValidationError

from lightning_time import __version__
from lightning_time._clock import WallClockPort
from lightning_time._codec import LightningTime, now
from lightning_time._colors import colors, format_colors
from lightning_time._errors import InvalidConversion
from lightning_time._logging import configure_logging
from lightning_time._settings import LoggingSettings, Settings
from lightning_time._text import format_time, parse
from lightning_time._time_of_day import TimeOfDay

logger = logging.getLogger(__name__)

SERVICE_NAME = "lightning-time"

# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_CONVERSION_ERROR = 3

# ---------------------------------------------------------------------------
# Allowed values (extracted from LoggingSettings Literal types)
# ---------------------------------------------------------------------------

_VALID_LOG_LEVELS: tuple[str, ...] = get_args(
    LoggingSettings.model_fields["level"].annotation,
)
_VALID_LOG_FORMATS: tuple[str, ...] = get_args(
    LoggingSettings.model_fields["format"].annotation,
)


@dataclass
class _State:
    """Per-invocation state handed from the callback to subcommands."""

    settings: Settings
    clock: WallClockPort | None


def build_cli(*, clock: WallClockPort | None = None) -> typer.Typer:
    """Construct the ``lightning-time`` Typer app.

    Args:
        clock: Wall clock used whenever the current time is needed.
            ``None`` selects the system's local time.

    Returns:
        A configured :class:`typer.Typer` ready to invoke.
    """
    cli = typer.Typer(
        help=(
            "Convert between Lightning Time and ISO 8601 times of day. "
            "Omit the command to print the current Lightning Time."
        ),
    )

    @cli.callback(invoke_without_command=True)
    def main(
        ctx: typer.Context,
        version_flag: Annotated[
            bool | None,
            typer.Option("--version", is_eager=True, help="Show version and exit."),
        ] = None,
        log_level: Annotated[
            str | None,
            typer.Option("--log-level", help="Override log level."),
        ] = None,
        log_format: Annotated[
            str | None,
            typer.Option("--log-format", help="Override log format."),
        ] = None,
        env_file: Annotated[
            str,
            typer.Option("--env-file", help="Path to .env file."),
        ] = ".env",
    ) -> None:
        if version_flag:
            typer.echo(f"{SERVICE_NAME} v{__version__}")
            raise typer.Exit()

        if log_level is not None and log_level.upper() not in _VALID_LOG_LEVELS:
            raise typer.BadParameter(
                f"Invalid log level '{log_level}'. "
                f"Choose from: {', '.join(_VALID_LOG_LEVELS)}",
                param_hint="'--log-level'",
            )

        if log_format is not None and log_format.lower() not in _VALID_LOG_FORMATS:
            raise typer.BadParameter(
                f"Invalid log format '{log_format}'. "
                f"Choose from: {', '.join(_VALID_LOG_FORMATS)}",
                param_hint="'--log-format'",
            )

        try:
            settings = Settings(_env_file=env_file)  # type: ignore[call-arg]
        except ValidationError as exc:
            logger.error("Configuration error: %s", exc)
            raise SystemExit(EXIT_CONFIG_ERROR) from exc

        if log_level is not None:
            settings.logging = settings.logging.model_copy(
                update={"level": log_level.upper()},
            )
        if log_format is not None:
            settings.logging = settings.logging.model_copy(
                update={"format": log_format.lower()},
            )

        configure_logging(settings.logging, service=SERVICE_NAME, version=__version__)

        ctx.obj = _State(settings=settings, clock=clock)
        if ctx.invoked_subcommand is None:
            typer.echo(format_time(now(clock)))

    @cli.command("colors")
    def colors_command(
        ctx: typer.Context,
        time: Annotated[
            str | None,
            typer.Argument(help="Lightning Time to convert. Defaults to now."),
        ] = None,
    ) -> None:
        """Print the bolt, zap and spark colors as comma-separated hex."""
        state: _State = ctx.obj
        value = now(state.clock) if time is None else _parse_or_exit(time)
        scheme = state.settings.colors.to_scheme()
        typer.echo(format_colors(colors(value, scheme)))

    @cli.command("from")
    def from_command(
        iso: Annotated[str, typer.Argument(help="Time of day as HH:MM:SS[.fraction].")],
    ) -> None:
        """Convert an ISO 8601 time of day to Lightning Time."""
        try:
            time_of_day = TimeOfDay.parse(iso.strip())
        except InvalidConversion as exc:
            logger.error("%s", exc)
            raise SystemExit(EXIT_CONVERSION_ERROR) from exc
        typer.echo(format_time(LightningTime.from_time(time_of_day)))

    @cli.command("to")
    def to_command(
        time: Annotated[str, typer.Argument(help="Lightning Time, e.g. 8~0~0|00.")],
    ) -> None:
        """Convert Lightning Time to an ISO 8601 time of day."""
        value = _parse_or_exit(time)
        try:
            time_of_day = value.to_time_of_day()
        except InvalidConversion as exc:
            logger.error("%s", exc)
            raise SystemExit(EXIT_CONVERSION_ERROR) from exc
        typer.echo(time_of_day.isoformat())

    return cli


def _parse_or_exit(text: str) -> LightningTime:
    try:
        return parse(text.strip())
    except InvalidConversion as exc:
        logger.error("Failed to parse Lightning Time: %s", exc)
        raise SystemExit(EXIT_CONVERSION_ERROR) from exc


def main() -> None:
    """Console-script entry point."""
    build_cli()()
