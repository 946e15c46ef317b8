"""
Domain models for wrist weather.

Pydantic models for weather readings and how they are labelled on the watch
face. Readings always store metric values; display values are derived from
the reading's measurement system on every access.
"""

from __future__ import annotations

import string
from datetime import datetime
from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from wrist_weather.units import celsius_to_fahrenheit, identity, km_to_miles

# =============================================================================
# Units
# =============================================================================


class MeasurementSystem(StrEnum):
    """Unit system used for display values."""

    METRIC = "metric"
    US_CUSTOMARY = "us"

    @classmethod
    def parse(cls, value: str | MeasurementSystem) -> MeasurementSystem:
        """Coerce a name like ``"metric"`` or ``"US"`` into a member."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().replace("-", "_")
        aliases = {"us_customary": cls.US_CUSTOMARY, "uscustomary": cls.US_CUSTOMARY}
        if key in aliases:
            return aliases[key]
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown measurement system: {value!r}") from None

    @property
    def temperature_unit(self) -> str:
        return "°C" if self is MeasurementSystem.METRIC else "°F"

    @property
    def wind_speed_unit(self) -> str:
        return "km/h" if self is MeasurementSystem.METRIC else "MPH"


# =============================================================================
# Conditions
# =============================================================================


class WeatherCondition(StrEnum):
    """
    Sky condition.

    The value doubles as the display label and the image asset name, so every
    renderer needs an image named after each member.
    """

    SUNNY = "Sunny"
    CLOUDY = "Cloudy"
    RAIN = "Rain"
    SNOW = "Snow"


# =============================================================================
# Intervals
# =============================================================================


class Instant(BaseModel):
    """Current conditions."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["instant"] = "instant"


class Hour(BaseModel):
    """A specific upcoming hour."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["hour"] = "hour"
    time: datetime


class Day(BaseModel):
    """A specific upcoming calendar day."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["day"] = "day"
    date: datetime


WeatherInterval = Annotated[Instant | Hour | Day, Field(discriminator="kind")]

#: Fields available to ``LabelFormat`` templates.
LABEL_FIELDS = frozenset({"hour", "hour12", "minute", "ampm", "weekday", "day", "month"})


def _label_fields(moment: datetime) -> dict[str, Any]:
    return {
        "hour": moment.hour,
        "hour12": moment.hour % 12 or 12,
        "minute": f"{moment.minute:02d}",
        "ampm": "AM" if moment.hour < 12 else "PM",
        "weekday": moment.strftime("%a"),
        "day": moment.day,
        "month": moment.strftime("%b"),
    }


class LabelFormat(BaseModel):
    """
    How interval labels are spelled.

    Templates are ``str.format`` strings over ``LABEL_FIELDS``. The defaults
    give ``3PM`` for an hour and ``Mon 4`` for a day.
    """

    model_config = ConfigDict(frozen=True)

    hour_format: str = "{hour12}{ampm}"
    day_format: str = "{weekday} {day}"
    now_label: str = "Now"

    @field_validator("hour_format", "day_format")
    @classmethod
    def _known_fields(cls, template: str) -> str:
        names = [name for _, name, _, _ in string.Formatter().parse(template) if name is not None]
        if any(not name or name.isdigit() for name in names):
            raise ValueError("label fields must be named, e.g. {hour}")
        unknown = set(names) - LABEL_FIELDS
        if unknown:
            raise ValueError(f"unknown label fields: {', '.join(sorted(unknown))}")
        try:
            template.format(**_label_fields(datetime(2000, 1, 1)))
        except (IndexError, KeyError, ValueError) as e:
            raise ValueError(f"bad label template {template!r}: {e}") from e
        return template

    def format_hour(self, time: datetime) -> str:
        return self.hour_format.format(**_label_fields(time))

    def format_day(self, date: datetime) -> str:
        return self.day_format.format(**_label_fields(date))

    def format_interval(self, interval: Instant | Hour | Day) -> str:
        """Label for any interval variant."""
        match interval:
            case Hour(time=time):
                return self.format_hour(time)
            case Day(date=date):
                return self.format_day(date)
            case _:
                return self.now_label


# =============================================================================
# Readings
# =============================================================================


class WeatherReading(BaseModel):
    """
    One immutable snapshot of weather values for one interval.

    Stored fields are metric (``*_c`` in °C, ``wind_speed_kmh`` in km/h).
    ``temperature``, ``wind_speed`` and friends convert to the reading's
    measurement system when read.
    """

    model_config = ConfigDict(frozen=True)

    measurement_system: MeasurementSystem
    interval: WeatherInterval
    temperature_c: int = Field(..., description="Temperature (°C)")
    feel_temperature_c: int = Field(..., description="Apparent temperature (°C)")
    high_temperature_c: int = Field(..., description="High temperature (°C)")
    low_temperature_c: int = Field(..., description="Low temperature (°C)")
    wind_speed_kmh: int = Field(..., ge=0, description="Wind speed (km/h)")
    wind_direction: str = Field(..., description="Compass abbreviation, e.g. NE")
    condition: WeatherCondition

    def _convert_temperature(self, celsius: int) -> int:
        if self.measurement_system is MeasurementSystem.METRIC:
            return identity(celsius)
        return celsius_to_fahrenheit(celsius)

    @property
    def temperature(self) -> int:
        return self._convert_temperature(self.temperature_c)

    @property
    def feel_temperature(self) -> int:
        return self._convert_temperature(self.feel_temperature_c)

    @property
    def high_temperature(self) -> int:
        return self._convert_temperature(self.high_temperature_c)

    @property
    def low_temperature(self) -> int:
        return self._convert_temperature(self.low_temperature_c)

    @property
    def wind_speed(self) -> int:
        """Wind speed in km/h (metric) or mph (US customary)."""
        if self.measurement_system is MeasurementSystem.METRIC:
            return self.wind_speed_kmh
        return km_to_miles(self.wind_speed_kmh)

    def interval_label(self, fmt: LabelFormat | None = None) -> str:
        """``Now``, an hour such as ``3PM`` or a day such as ``Mon 4``."""
        return (fmt or LabelFormat()).format_interval(self.interval)

    @property
    def temperature_label(self) -> str:
        return f"{self.temperature}°"

    @property
    def feel_temperature_label(self) -> str:
        return f"Feels like {self.feel_temperature}°"

    @property
    def high_low_label(self) -> str:
        return f"H {self.high_temperature}° L {self.low_temperature}°"

    @property
    def condition_label(self) -> str:
        return self.condition.value

    @property
    def condition_image_key(self) -> str:
        return self.condition.value

    @property
    def wind_label(self) -> str:
        return f"{self.wind_speed}{self.measurement_system.wind_speed_unit} {self.wind_direction}"

    def to_display_dict(self, fmt: LabelFormat | None = None) -> dict[str, Any]:
        """Everything a renderer needs, already converted and formatted."""
        return {
            "interval": self.interval_label(fmt),
            "units": self.measurement_system.value,
            "temperature": self.temperature,
            "feel_temperature": self.feel_temperature,
            "high_temperature": self.high_temperature,
            "low_temperature": self.low_temperature,
            "wind_speed": self.wind_speed,
            "wind_direction": self.wind_direction,
            "condition": self.condition_label,
            "temperature_label": self.temperature_label,
            "feel_temperature_label": self.feel_temperature_label,
            "wind_label": self.wind_label,
        }
