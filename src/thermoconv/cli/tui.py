"""CLI command that launches the interactive converter."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from thermoconv._internal.log_setup import disable_verbose_logging
from thermoconv.cli._options import UNIT, global_options
from thermoconv.models.config import MAX_DECIMAL_PLACES
from thermoconv.session import ConverterSession

if TYPE_CHECKING:
    from thermoconv.cli.main import AppContext
    from thermoconv.models.units import TemperatureUnit

TUI_LOG_NAME = "tui.log"


@click.command("tui")
@click.option("--from", "-f", "from_unit", type=UNIT, default=None, help="Initial source unit")
@click.option("--to", "-t", "to_unit", type=UNIT, default=None, help="Initial target unit")
@click.option(
    "--places",
    "-p",
    "decimal_places",
    type=click.IntRange(0, MAX_DECIMAL_PLACES),
    default=None,
    help="Initial precision",
)
@global_options
def tui_cmd(
    app_ctx: AppContext,
    from_unit: TemperatureUnit | None,
    to_unit: TemperatureUnit | None,
    decimal_places: int | None,
) -> None:
    """Open the full-screen converter.

    Conversions saved during the session are printed after it closes.
    With --verbose, logs are written to tui.log in the config directory
    instead of the terminal.
    """
    from thermoconv.tui import ConverterTUI

    settings = app_ctx.settings
    app_ctx.configure_logging(log_file=Path(settings.config_dir).expanduser() / TUI_LOG_NAME)

    session = ConverterSession.from_settings(settings)
    if from_unit is not None:
        session.from_unit = from_unit
    if to_unit is not None:
        session.to_unit = to_unit
    if decimal_places is not None:
        session.set_decimal_places(decimal_places)

    try:
        ConverterTUI(session).run()
    finally:
        disable_verbose_logging()

    if session.history.is_empty:
        return
    formatter = app_ctx.formatter
    if formatter.format == "json":
        formatter.output(list(session.history.records), command="tui")
    else:
        formatter.rich.history(session.history.records)
