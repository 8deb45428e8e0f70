"""Shared fixtures for CLI execution tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from thermoconv._internal.log_setup import disable_verbose_logging


@pytest.fixture(autouse=True)
def cli_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Run each CLI test from an empty directory with no THERMOCONV_* overrides."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "THERMOCONV_FROM_UNIT",
        "THERMOCONV_TO_UNIT",
        "THERMOCONV_DECIMAL_PLACES",
        "THERMOCONV_OUTPUT_FORMAT",
        "THERMOCONV_HISTORY_SIZE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("THERMOCONV_CONFIG_DIR", str(tmp_path / "config"))
    return tmp_path


@pytest.fixture(autouse=True)
def _reset_verbose_logging() -> Iterator[None]:
    yield
    disable_verbose_logging()
