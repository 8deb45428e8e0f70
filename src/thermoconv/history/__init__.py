"""Saved conversions and the bounded history that holds them."""

from thermoconv.history.buffer import MAX_HISTORY_ITEMS, HistoryBuffer
from thermoconv.history.models import ConversionRecord

__all__ = [
    "MAX_HISTORY_ITEMS",
    "ConversionRecord",
    "HistoryBuffer",
]
