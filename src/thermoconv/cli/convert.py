"""CLI commands for one-shot conversions and listing units."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from thermoconv.cli._options import UNIT, global_options
from thermoconv.converter import convert, format_temperature
from thermoconv.models.units import TemperatureUnit

if TYPE_CHECKING:
    from thermoconv.cli.main import AppContext

logger = logging.getLogger(__name__)


# Unknown "options" are kept as arguments so negative values like -40 work.
@click.command("convert", context_settings={"ignore_unknown_options": True})
@click.argument("value")
@click.option("--from", "-f", "from_unit", type=UNIT, default=None, help="Source unit (C, F, K)")
@click.option("--to", "-t", "to_unit", type=UNIT, default=None, help="Target unit (C, F, K)")
@click.option(
    "--places",
    "-p",
    "decimal_places",
    type=click.IntRange(min=0),
    default=None,
    help="Digits after the decimal point",
)
@global_options
def convert_cmd(
    app_ctx: AppContext,
    value: str,
    from_unit: TemperatureUnit | None,
    to_unit: TemperatureUnit | None,
    decimal_places: int | None,
) -> None:
    """Convert VALUE from one temperature unit to another.

    Units default to THERMOCONV_FROM_UNIT and THERMOCONV_TO_UNIT
    (Celsius to Fahrenheit).
    """
    app_ctx.configure_logging()
    formatter = app_ctx.formatter
    settings = app_ctx.settings

    source = from_unit or settings.from_unit
    target = to_unit or settings.to_unit
    places = settings.decimal_places if decimal_places is None else decimal_places

    number = convert(value, source, target)
    result = format_temperature(number, places)
    logger.debug("convert %r %s -> %s = %r", value, source, target, number)

    if formatter.format == "json":
        formatter.output(
            {
                "input": value,
                "from_unit": source.value,
                "to_unit": target.value,
                "value": number,
                "result": result,
                "decimal_places": places,
            },
            command="convert",
        )
    else:
        formatter.rich.conversion(value=value, from_unit=source, result=result, to_unit=target)


@click.command("units")
@global_options
def units_cmd(app_ctx: AppContext) -> None:
    """List the supported temperature units."""
    app_ctx.configure_logging()
    formatter = app_ctx.formatter
    units = list(TemperatureUnit)

    if formatter.format == "json":
        formatter.output(
            [
                {"name": unit.value, "abbreviation": unit.abbreviation, "code": unit.value[0]}
                for unit in units
            ],
            command="units",
        )
    else:
        formatter.rich.unit_list(units)
