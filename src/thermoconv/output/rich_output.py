from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from rich.console import Console

    from thermoconv.history.models import ConversionRecord
    from thermoconv.models.units import TemperatureUnit


class RichOutput:
    """Rich-based terminal output helpers for *thermoconv*."""

    def __init__(self, console: Console) -> None:
        self._con = console

    # ------------------------------------------------------------------
    # Conversion result
    # ------------------------------------------------------------------

    def conversion(
        self,
        *,
        value: str,
        from_unit: TemperatureUnit,
        result: str,
        to_unit: TemperatureUnit,
    ) -> None:
        """Print ``<value> <unit> → <result> <unit>`` with the result highlighted."""
        self._con.print(
            f"{value} {from_unit.abbreviation} → "
            f"[bold cyan]{result}[/bold cyan] {to_unit.abbreviation}"
        )

    # ------------------------------------------------------------------
    # Units
    # ------------------------------------------------------------------

    def unit_list(self, units: Iterable[TemperatureUnit]) -> None:
        """Print a table of the supported scales."""
        table = Table(title="Temperature Units")
        table.add_column("Unit", style="cyan")
        table.add_column("Symbol")
        table.add_column("Code", justify="center")

        for unit in units:
            table.add_row(unit.value, unit.abbreviation, unit.value[0])

        self._con.print(table)

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    def history(self, records: Sequence[ConversionRecord]) -> None:
        """Print saved conversions, newest first."""
        if not records:
            self._con.print("[dim italic]No conversion history yet[/dim italic]")
            return

        table = Table(title="Conversion History")
        table.add_column("Conversion")
        table.add_column("Time", style="dim")
        for record in records:
            table.add_row(record.summary, record.formatted_timestamp)

        self._con.print(table)

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------

    def error(self, message: str) -> None:
        """Print a bold red error line; *message* is shown literally."""
        self._con.print(f"[bold red]Error:[/bold red] {escape(message)}")

    def info(self, message: str) -> None:
        """Print an informational message (plain)."""
        self._con.print(message)
