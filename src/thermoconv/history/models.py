"""Pydantic v2 model for a saved conversion."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

from thermoconv.models.units import TemperatureUnit


def _make_record_id() -> str:
    return uuid.uuid4().hex


class ConversionRecord(BaseModel):
    """A completed conversion the user chose to keep.

    ``input_value`` is the text exactly as typed, and ``result`` is already
    formatted with the decimal places that were selected at save time.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_make_record_id)
    input_value: str
    from_unit: TemperatureUnit
    to_unit: TemperatureUnit
    result: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @property
    def formatted_timestamp(self) -> str:
        """Creation time as a short local clock time (``HH:MM``)."""
        return self.timestamp.astimezone().strftime("%H:%M")

    @property
    def summary(self) -> str:
        return (
            f"{self.input_value} {self.from_unit.abbreviation} → "
            f"{self.result} {self.to_unit.abbreviation}"
        )

    @property
    def caption(self) -> str:
        return f"Converted at {self.formatted_timestamp}"
