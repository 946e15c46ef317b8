"""Watch face renderer.

The face shows the current reading (temperature, feels-like, wind, a
condition image and its label) above an hourly strip and a daily strip.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from wrist_weather.renderers import render_template
from wrist_weather.schemas import LabelFormat

if TYPE_CHECKING:
    from wrist_weather.datasources import WeatherDataSource
    from wrist_weather.schemas import WeatherReading


@dataclass(frozen=True)
class HourlyRow:
    """One entry in the hourly strip."""

    label: str
    temperature: str
    condition_image_key: str


@dataclass(frozen=True)
class DailyRow:
    """One entry in the daily strip."""

    label: str
    high_low: str
    condition_label: str
    condition_image_key: str


@dataclass(frozen=True)
class WatchFace:
    """Display texts for every element on the face."""

    interval_label: str
    temperature_label: str
    feels_like_label: str
    wind_speed_label: str
    conditions_label: str
    conditions_image: str
    units: str
    hourly: list[HourlyRow] = field(default_factory=list)
    daily: list[DailyRow] = field(default_factory=list)


def _hourly_row(reading: WeatherReading, fmt: LabelFormat) -> HourlyRow:
    return HourlyRow(
        label=reading.interval_label(fmt),
        temperature=reading.temperature_label,
        condition_image_key=reading.condition_image_key,
    )


def _daily_row(reading: WeatherReading, fmt: LabelFormat) -> DailyRow:
    return DailyRow(
        label=reading.interval_label(fmt),
        high_low=reading.high_low_label,
        condition_label=reading.condition_label,
        condition_image_key=reading.condition_image_key,
    )


def build_watch_face(source: WeatherDataSource, fmt: LabelFormat | None = None) -> WatchFace:
    """Collect the label texts for a data source."""
    fmt = fmt or LabelFormat()
    current = source.current_weather
    return WatchFace(
        interval_label=current.interval_label(fmt),
        temperature_label=current.temperature_label,
        feels_like_label=current.feel_temperature_label,
        wind_speed_label=current.wind_label,
        conditions_label=current.condition_label,
        conditions_image=current.condition_image_key,
        units=source.measurement_system.temperature_unit,
        hourly=[_hourly_row(r, fmt) for r in source.short_term_weather],
        daily=[_daily_row(r, fmt) for r in source.long_term_weather],
    )


def render_watch_face_text(face: WatchFace) -> str:
    """Plain-text face for terminals."""
    return render_template("watch_face.txt.j2", face=face)


def render_watch_face_html(face: WatchFace, image_dir: str = "images") -> str:
    """HTML fragment; condition images are ``{image_dir}/{key}.png``."""
    return render_template("watch_face.html.j2", face=face, image_dir=image_dir)
