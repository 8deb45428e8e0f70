from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from thermoconv.models.units import TemperatureUnit

MAX_DECIMAL_PLACES = 4


class AppSettings(BaseSettings):
    """Application-wide settings populated from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="THERMOCONV_",
        extra="ignore",
    )

    from_unit: TemperatureUnit = TemperatureUnit.CELSIUS
    to_unit: TemperatureUnit = TemperatureUnit.FAHRENHEIT
    decimal_places: int = Field(default=2, ge=0, le=MAX_DECIMAL_PLACES)
    output_format: Literal["rich", "json", "quiet"] | None = None
    history_size: int = Field(default=10, ge=1)
    config_dir: str = "~/.config/thermoconv"

    @field_validator("from_unit", "to_unit", mode="before")
    @classmethod
    def _parse_unit(cls, value: Any) -> Any:
        if isinstance(value, str):
            return TemperatureUnit.parse(value)
        return value
