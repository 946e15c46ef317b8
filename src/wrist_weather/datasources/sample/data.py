"""Sample weather tables. All values metric (°C, km/h)."""

from __future__ import annotations

from dataclasses import dataclass

from wrist_weather.schemas import WeatherCondition


@dataclass(frozen=True)
class SampleRow:
    """One row of sample values."""

    temperature: int
    condition: WeatherCondition
    feel_temperature: int = 15
    high_temperature: int = 16
    low_temperature: int = 16
    wind_speed: int = 8
    wind_direction: str = "NE"


SAMPLE_CURRENT = SampleRow(temperature=16, condition=WeatherCondition.CLOUDY)

# +1h .. +7h
SAMPLE_HOURLY: tuple[SampleRow, ...] = (
    SampleRow(temperature=16, condition=WeatherCondition.CLOUDY),
    SampleRow(temperature=19, condition=WeatherCondition.CLOUDY),
    SampleRow(temperature=21, condition=WeatherCondition.RAIN),
    SampleRow(temperature=22, condition=WeatherCondition.CLOUDY),
    SampleRow(temperature=20, condition=WeatherCondition.SNOW),
    SampleRow(temperature=21, condition=WeatherCondition.SNOW),
    SampleRow(temperature=18, condition=WeatherCondition.SNOW),
)

# +1d .. +5d
SAMPLE_DAILY: tuple[SampleRow, ...] = (
    SampleRow(temperature=16, condition=WeatherCondition.CLOUDY),
    SampleRow(temperature=16, condition=WeatherCondition.RAIN),
    SampleRow(temperature=16, condition=WeatherCondition.SUNNY),
    SampleRow(temperature=16, condition=WeatherCondition.SUNNY),
    SampleRow(temperature=16, condition=WeatherCondition.SNOW),
)
