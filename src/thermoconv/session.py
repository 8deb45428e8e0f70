"""State behind one converter screen.

Holds what the user has typed and picked, and applies the screen's two
policies: the live preview never raises, and a save reports invalid input.
"""

from __future__ import annotations

import dataclasses
import logging

from thermoconv.converter import convert, format_temperature, is_valid_temperature
from thermoconv.errors import InvalidInputError
from thermoconv.history import ConversionRecord, HistoryBuffer
from thermoconv.models.config import MAX_DECIMAL_PLACES, AppSettings
from thermoconv.models.units import TemperatureUnit

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class ConverterSession:
    """Inputs, unit selection, precision and history for one converter."""

    input_text: str = ""
    from_unit: TemperatureUnit = TemperatureUnit.CELSIUS
    to_unit: TemperatureUnit = TemperatureUnit.FAHRENHEIT
    decimal_places: int = 2
    history: HistoryBuffer = dataclasses.field(default_factory=HistoryBuffer)

    @classmethod
    def from_settings(cls, settings: AppSettings) -> ConverterSession:
        return cls(
            from_unit=settings.from_unit,
            to_unit=settings.to_unit,
            decimal_places=settings.decimal_places,
            history=HistoryBuffer(capacity=settings.history_size),
        )

    @property
    def preview(self) -> str:
        """Converted value for display while typing.

        An empty field converts ``"0"``; unparseable input also shows
        ``"0"`` since errors are only reported on save.
        """
        try:
            result = convert(self.input_text or "0", self.from_unit, self.to_unit)
        except InvalidInputError:
            return "0"
        return format_temperature(result, self.decimal_places)

    @property
    def preview_label(self) -> str:
        return f"{self.preview} {self.to_unit.abbreviation}"

    @property
    def can_save(self) -> bool:
        return bool(self.input_text)

    @property
    def input_is_valid(self) -> bool:
        return is_valid_temperature(self.input_text)

    def set_decimal_places(self, places: int) -> None:
        if not 0 <= places <= MAX_DECIMAL_PLACES:
            raise ValueError(f"decimal places must be between 0 and {MAX_DECIMAL_PLACES}")
        self.decimal_places = places

    def swap_units(self) -> None:
        self.from_unit, self.to_unit = self.to_unit, self.from_unit

    def save(self) -> ConversionRecord:
        """Convert the current input and add it to the history.

        Raises :class:`InvalidInputError` if the input is not a number; the
        history is left untouched in that case.
        """
        try:
            value = convert(self.input_text, self.from_unit, self.to_unit)
        except InvalidInputError:
            logger.debug("Rejected save for input %r", self.input_text)
            raise
        record = ConversionRecord(
            input_value=self.input_text,
            from_unit=self.from_unit,
            to_unit=self.to_unit,
            result=format_temperature(value, self.decimal_places),
        )
        self.history.add_record(record)
        logger.info("Saved conversion %s", record.summary)
        return record
