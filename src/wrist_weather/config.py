"""
Application settings.

Values come from ``WRIST_WEATHER_*`` environment variables or a ``.env``
file, e.g. ``WRIST_WEATHER_MEASUREMENT_SYSTEM=us``.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from wrist_weather.schemas import LabelFormat, MeasurementSystem


class Settings(BaseSettings):
    """Runtime configuration."""

    model_config = SettingsConfigDict(
        env_prefix="WRIST_WEATHER_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = Field(default="wrist-weather")
    app_env: str = Field(default="development")
    debug: bool = Field(default=False)

    measurement_system: MeasurementSystem = Field(
        default=MeasurementSystem.METRIC, description="metric or us"
    )

    # Interval labels (see LabelFormat for the available fields)
    hour_label_format: str = Field(default="{hour12}{ampm}")
    day_label_format: str = Field(default="{weekday} {day}")
    now_label: str = Field(default="Now")

    @field_validator("measurement_system", mode="before")
    @classmethod
    def _parse_measurement_system(cls, value: object) -> object:
        if isinstance(value, str):
            return MeasurementSystem.parse(value)
        return value

    def label_format(self) -> LabelFormat:
        """Build the interval label configuration."""
        return LabelFormat(
            hour_format=self.hour_label_format,
            day_format=self.day_label_format,
            now_label=self.now_label,
        )


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process."""
    return Settings()
