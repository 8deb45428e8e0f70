"""Interactive full-screen converter built on Textual."""

from thermoconv.tui.app import ConverterTUI, HistoryScreen

__all__ = [
    "ConverterTUI",
    "HistoryScreen",
]
