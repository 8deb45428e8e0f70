"""Temperature conversion and display formatting.

Every cross-unit conversion goes through Celsius: the value is first
brought to Celsius, then taken to the destination scale. Each result is
therefore at most two arithmetic steps away from the input.
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Context, Decimal

from thermoconv._internal.units import from_celsius, to_celsius
from thermoconv.errors import InvalidInputError
from thermoconv.models.units import TemperatureUnit

# Optional sign, digits, optional fraction. No exponent, no whitespace.
_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")


def parse_temperature(text: str) -> float:
    """Parse *text* as a plain decimal number.

    Raises :class:`InvalidInputError` for anything else, including the empty
    string, exponents, ``inf`` and ``nan``.
    """
    if not _NUMBER_RE.fullmatch(text):
        raise InvalidInputError(text)
    value = float(text)
    if not math.isfinite(value):
        # Enough digits overflow to inf.
        raise InvalidInputError(text)
    return value


def is_valid_temperature(text: str) -> bool:
    """Return ``True`` if *text* would be accepted by :func:`convert`."""
    try:
        parse_temperature(text)
    except InvalidInputError:
        return False
    return True


def convert(value: str, from_unit: TemperatureUnit, to_unit: TemperatureUnit) -> float:
    """Convert the temperature *value* from *from_unit* to *to_unit*.

    When both units are the same the parsed number is returned untouched.

    Raises :class:`InvalidInputError` if *value* is not a number.
    """
    number = parse_temperature(value)
    if from_unit == to_unit:
        return number
    return from_celsius(to_celsius(number, from_unit), to_unit)


def format_temperature(value: float, decimal_places: int = 2) -> str:
    """Render *value* with exactly *decimal_places* digits after the point.

    Ties round away from zero, judged on the shortest decimal form of the
    float, so ``98.765`` becomes ``"98.77"`` at two places.
    """
    if decimal_places < 0:
        raise ValueError(f"decimal_places must be >= 0, got {decimal_places}")
    value = float(value)
    if not math.isfinite(value):
        return f"{value:.{decimal_places}f}"

    exact = Decimal(repr(value))
    quantum = Decimal(1).scaleb(-decimal_places)
    ctx = Context(prec=max(28, exact.adjusted() + decimal_places + 2))
    return format(exact.quantize(quantum, rounding=ROUND_HALF_UP, context=ctx), "f")
