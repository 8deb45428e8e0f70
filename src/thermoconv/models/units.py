"""Supported temperature scales."""

from __future__ import annotations

from enum import StrEnum


class TemperatureUnit(StrEnum):
    """A temperature scale. The value is the display name."""

    CELSIUS = "Celsius"
    FAHRENHEIT = "Fahrenheit"
    KELVIN = "Kelvin"

    @property
    def abbreviation(self) -> str:
        """Short symbol shown next to values (``°C``, ``°F``, ``K``)."""
        return _ABBREVIATIONS[self]

    @property
    def id(self) -> str:  # noqa: A003
        return self.value

    @classmethod
    def parse(cls, text: str) -> TemperatureUnit:
        """Resolve *text* to a unit.

        Accepts the full name, the single-letter code or the abbreviation,
        case-insensitively (``"kelvin"``, ``"F"``, ``"°C"``).
        """
        key = text.strip().lower().removeprefix("°")
        for unit in cls:
            if key in (unit.value.lower(), unit.value[0].lower()):
                return unit
        raise ValueError(f"Unknown temperature unit: {text!r}. Use C, F or K.")


_ABBREVIATIONS: dict[TemperatureUnit, str] = {
    TemperatureUnit.CELSIUS: "°C",
    TemperatureUnit.FAHRENHEIT: "°F",
    TemperatureUnit.KELVIN: "K",
}
