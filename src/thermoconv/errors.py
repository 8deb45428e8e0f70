"""Exception types raised by thermoconv."""

from __future__ import annotations


class ThermoconvError(Exception):
    """Base class for thermoconv errors."""


class InvalidInputError(ThermoconvError):
    """Raised when a temperature string cannot be parsed as a number."""

    user_message = "Please enter a valid number for the temperature."

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid temperature value: {value!r}")
        self.value = value
