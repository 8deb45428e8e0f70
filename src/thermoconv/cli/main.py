"""CLI entry-point: Click command group and dispatch."""

from __future__ import annotations

import dataclasses
import logging
import sys
from pathlib import Path

import click
from rich.markup import escape

from thermoconv._internal.log_setup import enable_verbose_logging
from thermoconv.errors import InvalidInputError
from thermoconv.models.config import AppSettings
from thermoconv.output.formatter import FORMATS, OutputFormatter

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Application context (stored in ctx.obj)
# ---------------------------------------------------------------------------


@dataclasses.dataclass
class AppContext:
    """Shared state passed to every Click command via ``@click.pass_obj``."""

    output_format: str | None
    quiet: bool
    verbose: bool
    _formatter: OutputFormatter | None = dataclasses.field(default=None, repr=False)
    _settings: AppSettings | None = dataclasses.field(default=None, repr=False)

    @property
    def settings(self) -> AppSettings:
        if self._settings is None:
            self._settings = AppSettings()
        return self._settings

    @property
    def formatter(self) -> OutputFormatter:
        if self._formatter is None:
            force = "quiet" if self.quiet else self.output_format or self.settings.output_format
            self._formatter = OutputFormatter(force_format=force)
        return self._formatter

    def configure_logging(self, *, log_file: Path | None = None) -> None:
        """Turn on debug logging when ``--verbose`` was given."""
        if self.verbose:
            enable_verbose_logging(log_file=log_file)
            logger.debug("Verbose logging enabled")


# ---------------------------------------------------------------------------
# Root Click group
# ---------------------------------------------------------------------------


@click.group()
@click.option(
    "--format",
    "output_format",
    type=click.Choice(FORMATS),
    default=None,
    help="Output format (default: auto-detect)",
)
@click.option("--quiet", is_flag=True, default=False, help="Suppress normal output")
@click.option("--verbose", is_flag=True, default=False, help="Enable verbose logging")
@click.version_option(package_name="thermoconv")
@click.pass_context
def cli(
    ctx: click.Context,
    output_format: str | None,
    quiet: bool,
    verbose: bool,
) -> None:
    """Convert temperatures between Celsius, Fahrenheit and Kelvin."""
    ctx.ensure_object(dict)
    ctx.obj = AppContext(
        output_format=output_format,
        quiet=quiet,
        verbose=verbose,
    )


# ---------------------------------------------------------------------------
# Register subcommands (lazy imports keep startup fast)
# ---------------------------------------------------------------------------


def _register_commands() -> None:
    """Import and attach all subcommands to the root CLI."""
    from thermoconv.cli.convert import convert_cmd, units_cmd
    from thermoconv.cli.tui import tui_cmd

    cli.add_command(convert_cmd)
    cli.add_command(units_cmd)
    cli.add_command(tui_cmd)


_register_commands()


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and dispatch to the appropriate command handler."""
    args = sys.argv[1:] if argv is None else list(argv)
    ctx: click.Context | None = None
    try:
        ctx = cli.make_context("thermoconv", args)
        with ctx:
            cli.invoke(ctx)
    except click.exceptions.Exit as exc:
        raise SystemExit(exc.exit_code) from None
    except click.exceptions.Abort:
        raise SystemExit(1) from None
    except click.ClickException as exc:
        exc.show()
        raise SystemExit(exc.exit_code) from None
    except KeyboardInterrupt:
        raise SystemExit(130) from None
    except SystemExit:
        raise
    except Exception as exc:
        # The root context is kept so --format survives into error output.
        app_ctx = ctx.obj if ctx is not None and isinstance(ctx.obj, AppContext) else None
        formatter = _error_formatter(app_ctx)
        cmd_name = (ctx.invoked_subcommand if ctx is not None else None) or "unknown"

        if _handle_known_error(exc, formatter, cmd_name):
            raise SystemExit(1) from exc

        logger.debug("Unhandled error in %s", cmd_name, exc_info=True)
        formatter.output_error(
            code=type(exc).__name__,
            message=str(exc),
            command=cmd_name,
        )
        raise SystemExit(1) from exc


# ---------------------------------------------------------------------------
# Helpers for error handling
# ---------------------------------------------------------------------------


def _error_formatter(app_ctx: AppContext | None) -> OutputFormatter:
    """Return a formatter for error output, even when settings fail to load.

    Only the command-line flags are used in the fallback since those were
    already validated by Click.
    """
    if app_ctx is None:
        return OutputFormatter()
    try:
        return app_ctx.formatter
    except ValueError:
        logger.debug("Settings unusable, formatting error from flags only", exc_info=True)
        force = "quiet" if app_ctx.quiet else app_ctx.output_format
        return OutputFormatter(force_format=force)


def _handle_known_error(
    exc: Exception,
    formatter: OutputFormatter,
    cmd_name: str,
) -> bool:
    """Handle well-known errors with friendly output.

    Returns ``True`` if the error was handled and the caller should exit.
    """
    if isinstance(exc, InvalidInputError):
        _handle_invalid_input(exc, formatter, cmd_name)
        return True
    return False


def _handle_invalid_input(
    exc: InvalidInputError,
    formatter: OutputFormatter,
    cmd_name: str,
) -> None:
    """Explain what a valid temperature looks like."""
    if formatter.format == "json":
        formatter.output_error(
            code="invalid_input",
            message=f"{exc.user_message} Got {exc.value!r}.",
            command=cmd_name,
        )
        return

    formatter.rich.error(exc.user_message)
    got = escape(repr(exc.value))
    formatter.rich.info(f"[dim]Got {got}; expected e.g. 21, -40 or 98.6.[/dim]")
