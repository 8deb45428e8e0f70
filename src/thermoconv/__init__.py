"""Convert temperatures between Celsius, Fahrenheit and Kelvin."""

from thermoconv.converter import (
    convert,
    format_temperature,
    is_valid_temperature,
    parse_temperature,
)
from thermoconv.errors import InvalidInputError, ThermoconvError
from thermoconv.history import MAX_HISTORY_ITEMS, ConversionRecord, HistoryBuffer
from thermoconv.models.units import TemperatureUnit
from thermoconv.session import ConverterSession

__version__ = "0.3.0"

__all__ = [
    "MAX_HISTORY_ITEMS",
    "ConversionRecord",
    "ConverterSession",
    "HistoryBuffer",
    "InvalidInputError",
    "TemperatureUnit",
    "ThermoconvError",
    "convert",
    "format_temperature",
    "is_valid_temperature",
    "parse_temperature",
]
