"""Verbose logging for the command line and the TUI."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

LOG_FORMAT = "%(asctime)s  %(levelname)-5s  %(name)s  %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

_handler: logging.Handler | None = None


def enable_verbose_logging(*, log_file: Path | None = None) -> logging.Handler:
    """Send DEBUG output of the ``thermoconv`` loggers to stderr or *log_file*.

    Calling again replaces the previous handler. Full-screen apps pass a
    *log_file* since writes to stderr would corrupt the display.
    """
    global _handler

    pkg_logger = logging.getLogger("thermoconv")
    if _handler is not None:
        pkg_logger.removeHandler(_handler)
        _handler.close()

    handler: logging.Handler
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(logging.DEBUG)
    _handler = handler
    return handler


def disable_verbose_logging() -> None:
    """Detach and close the handler installed by :func:`enable_verbose_logging`."""
    global _handler

    if _handler is None:
        return
    pkg_logger = logging.getLogger("thermoconv")
    pkg_logger.removeHandler(_handler)
    pkg_logger.setLevel(logging.NOTSET)
    _handler.close()
    _handler = None
