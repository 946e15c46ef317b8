"""Tests for WeatherDataSource and the sample provider."""

from __future__ import annotations

import time
from collections.abc import Iterator
from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from wrist_weather.datasources import WeatherDataSource
from wrist_weather.datasources.sample import (
    SAMPLE_DAILY,
    SAMPLE_HOURLY,
    SampleProvider,
    SampleRow,
)
from wrist_weather.datasources.sample.provider import add_days
from wrist_weather.schemas import (
    Day,
    Hour,
    Instant,
    MeasurementSystem,
    WeatherCondition,
    WeatherReading,
)


class TestCurrentWeather:
    """Test the current reading."""

    def test_instant(self, now: datetime) -> None:
        source = WeatherDataSource(MeasurementSystem.METRIC, now=now)
        assert isinstance(source.current_weather.interval, Instant)
        assert source.current_weather.interval_label() == "Now"

    def test_sample_values(self, now: datetime) -> None:
        current = WeatherDataSource(MeasurementSystem.METRIC, now=now).current_weather
        assert current.temperature_label == "16°"
        assert current.feel_temperature_label == "Feels like 15°"
        assert current.wind_label == "8km/h NE"
        assert current.condition is WeatherCondition.CLOUDY

    def test_us_customary(self, now: datetime) -> None:
        current = WeatherDataSource(MeasurementSystem.US_CUSTOMARY, now=now).current_weather
        assert current.temperature == 60
        assert current.wind_label == "4MPH NE"


class TestShortTermWeather:
    """Test the hourly sequence."""

    def test_seven_hours(self, now: datetime) -> None:
        source = WeatherDataSource(MeasurementSystem.METRIC, now=now)
        assert len(source.short_term_weather) == 7

    def test_hours_increase_from_now(self, now: datetime) -> None:
        source = WeatherDataSource(MeasurementSystem.METRIC, now=now)
        times = []
        for reading in source.short_term_weather:
            assert isinstance(reading.interval, Hour)
            times.append(reading.interval.time)
        assert times == [now + timedelta(hours=h) for h in range(1, 8)]
        assert all(a < b for a, b in zip(times, times[1:]))

    def test_labels(self, now: datetime) -> None:
        source = WeatherDataSource(MeasurementSystem.METRIC, now=now)
        labels = [r.interval_label() for r in source.short_term_weather]
        assert labels == ["3PM", "4PM", "5PM", "6PM", "7PM", "8PM", "9PM"]

    def test_sample_temperatures(self, now: datetime) -> None:
        source = WeatherDataSource(MeasurementSystem.METRIC, now=now)
        temps = [r.temperature for r in source.short_term_weather]
        assert temps == [row.temperature for row in SAMPLE_HOURLY]
        assert temps == [16, 19, 21, 22, 20, 21, 18]


class TestLongTermWeather:
    """Test the daily sequence."""

    def test_five_days(self, now: datetime) -> None:
        source = WeatherDataSource(MeasurementSystem.METRIC, now=now)
        assert len(source.long_term_weather) == 5

    def test_days_increase_from_now(self, now: datetime) -> None:
        source = WeatherDataSource(MeasurementSystem.METRIC, now=now)
        dates = []
        for reading in source.long_term_weather:
            assert isinstance(reading.interval, Day)
            dates.append(reading.interval.date)
        assert dates == [now + timedelta(days=d) for d in range(1, 6)]

    def test_labels(self, now: datetime) -> None:
        source = WeatherDataSource(MeasurementSystem.METRIC, now=now)
        labels = [r.interval_label() for r in source.long_term_weather]
        assert labels == ["Thu 5", "Fri 6", "Sat 7", "Sun 8", "Mon 9"]

    def test_sample_conditions(self, now: datetime) -> None:
        source = WeatherDataSource(MeasurementSystem.METRIC, now=now)
        conditions = [r.condition for r in source.long_term_weather]
        assert conditions == [row.condition for row in SAMPLE_DAILY]


class TestWeatherDataSource:
    """Test source-wide behaviour."""

    @pytest.mark.parametrize("system", list(MeasurementSystem))
    def test_readings_share_measurement_system(
        self, system: MeasurementSystem, now: datetime
    ) -> None:
        source = WeatherDataSource(system, now=now)
        readings = [source.current_weather, *source.short_term_weather, *source.long_term_weather]
        assert {r.measurement_system for r in readings} == {system}
        assert source.measurement_system is system

    def test_accepts_string(self, now: datetime) -> None:
        source = WeatherDataSource("us", now=now)
        assert source.measurement_system is MeasurementSystem.US_CUSTOMARY

    def test_rejects_unknown_string(self) -> None:
        with pytest.raises(ValueError, match="Unknown measurement system"):
            WeatherDataSource("kelvin")

    def test_default_now_is_local_aware_time(self) -> None:
        before = datetime.now().astimezone()
        source = WeatherDataSource(MeasurementSystem.METRIC)
        after = datetime.now().astimezone()
        assert source.created_at.tzinfo is not None
        assert before <= source.created_at <= after
        first = source.short_term_weather[0].interval
        assert isinstance(first, Hour)
        assert first.time == source.created_at + timedelta(hours=1)

    def test_sequences_are_read_only(self, now: datetime) -> None:
        source = WeatherDataSource(MeasurementSystem.METRIC, now=now)
        assert isinstance(source.short_term_weather, tuple)
        assert isinstance(source.long_term_weather, tuple)
        with pytest.raises(AttributeError):
            source.current_weather = source.current_weather  # type: ignore[misc]

    def test_repr(self, now: datetime) -> None:
        source = WeatherDataSource(MeasurementSystem.METRIC, now=now)
        assert repr(source) == "WeatherDataSource('metric', now='2026-02-04T14:30:00+00:00')"


class StubProvider:
    """A provider with one reading per sequence."""

    def _reading(self, system: MeasurementSystem, interval: Instant | Hour | Day) -> WeatherReading:
        return WeatherReading(
            measurement_system=system,
            interval=interval,
            temperature_c=-5,
            feel_temperature_c=-9,
            high_temperature_c=-2,
            low_temperature_c=-8,
            wind_speed_kmh=30,
            wind_direction="N",
            condition=WeatherCondition.SNOW,
        )

    def current(self, measurement_system: MeasurementSystem, now: datetime) -> WeatherReading:
        return self._reading(measurement_system, Instant())

    def hourly(self, measurement_system: MeasurementSystem, now: datetime) -> list[WeatherReading]:
        return [self._reading(measurement_system, Hour(time=now))]

    def daily(self, measurement_system: MeasurementSystem, now: datetime) -> list[WeatherReading]:
        return [self._reading(measurement_system, Day(date=now))]


class TestProviders:
    """Test swapping the provider."""

    def test_custom_provider(self, now: datetime) -> None:
        source = WeatherDataSource(MeasurementSystem.METRIC, now=now, provider=StubProvider())
        assert source.current_weather.temperature_label == "-5°"
        assert len(source.short_term_weather) == 1
        assert len(source.long_term_weather) == 1

    def test_custom_sample_rows(self, now: datetime) -> None:
        provider = SampleProvider(
            current=SampleRow(temperature=30, condition=WeatherCondition.SUNNY),
            hourly=(SampleRow(temperature=31, condition=WeatherCondition.SUNNY),),
            daily=(),
        )
        source = WeatherDataSource(MeasurementSystem.US_CUSTOMARY, now=now, provider=provider)
        assert source.current_weather.temperature == 86
        assert [r.temperature for r in source.short_term_weather] == [87]
        assert source.long_term_weather == ()


@pytest.fixture
def new_york_host(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run with the host clock in America/New_York."""
    monkeypatch.setenv("TZ", "America/New_York")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


class TestAddDays:
    """Daily readings keep their wall-clock time across DST changes."""

    def test_zoneinfo_across_spring_forward(self) -> None:
        # US clocks go forward on Sunday 2026-03-08
        start = datetime(2026, 3, 6, 12, 0, tzinfo=ZoneInfo("America/New_York"))
        days = [add_days(start, n) for n in range(1, 6)]
        assert [d.hour for d in days] == [12] * 5
        assert [d.day for d in days] == [7, 8, 9, 10, 11]
        assert days[0].utcoffset() == timedelta(hours=-5)
        assert days[-1].utcoffset() == timedelta(hours=-4)

    @pytest.mark.usefixtures("new_york_host")
    def test_host_offset_across_spring_forward(self) -> None:
        """A fixed offset taken from the host zone is re-resolved per day."""
        start = datetime(2026, 3, 6, 12, 0).astimezone()
        assert start.utcoffset() == timedelta(hours=-5)
        days = [add_days(start, n) for n in range(1, 6)]
        assert [d.hour for d in days] == [12] * 5
        assert days[-1].utcoffset() == timedelta(hours=-4)

    @pytest.mark.usefixtures("new_york_host")
    def test_source_day_labels_across_spring_forward(self) -> None:
        start = datetime(2026, 3, 6, 12, 0).astimezone()
        source = WeatherDataSource(MeasurementSystem.METRIC, now=start)
        dates = [r.interval.date for r in source.long_term_weather]  # type: ignore[union-attr]
        assert [d.hour for d in dates] == [12] * 5
        assert [r.interval_label() for r in source.long_term_weather] == [
            "Sat 7",
            "Sun 8",
            "Mon 9",
            "Tue 10",
            "Wed 11",
        ]

    def test_other_fixed_offset_is_plain_arithmetic(self) -> None:
        start = datetime(2026, 3, 6, 12, 0, tzinfo=UTC)
        assert add_days(start, 3) == start + timedelta(days=3)

    def test_naive(self) -> None:
        assert add_days(datetime(2026, 3, 6, 12), 2) == datetime(2026, 3, 8, 12)
