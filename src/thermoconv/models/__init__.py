from __future__ import annotations

from thermoconv.models.config import MAX_DECIMAL_PLACES, AppSettings
from thermoconv.models.units import TemperatureUnit

__all__ = [
    "MAX_DECIMAL_PLACES",
    "AppSettings",
    "TemperatureUnit",
]
