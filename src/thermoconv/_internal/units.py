"""Pivot formulas between each scale and Celsius."""

from __future__ import annotations

from thermoconv.models.units import TemperatureUnit


def to_celsius(value: float, unit: TemperatureUnit) -> float:
    """Convert *value* expressed in *unit* to Celsius."""
    if unit is TemperatureUnit.FAHRENHEIT:
        return (value - 32) * 5 / 9
    if unit is TemperatureUnit.KELVIN:
        return value - 273.15
    return value


def from_celsius(value: float, unit: TemperatureUnit) -> float:
    """Convert a Celsius *value* to *unit*."""
    if unit is TemperatureUnit.FAHRENHEIT:
        return (value * 9 / 5) + 32
    if unit is TemperatureUnit.KELVIN:
        return value + 273.15
    return value
