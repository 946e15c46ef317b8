"""Weather data sources.

``WeatherDataSource`` is the read-only object the watch face consumes. It
owns one current reading plus the hourly and daily sequences, all sharing a
single measurement system. Where the readings come from is up to a
``WeatherProvider``; the only one today is ``sample/``, which serves
hardcoded values.

Each provider lives in its own subdirectory:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── data.py           # Constants / tables (optional)
    └── provider.py       # The WeatherProvider implementation

Adding a provider
-----------------
1. Create ``datasources/{name}/`` with the files above.

2. Implement the three ``WeatherProvider`` methods. Each takes the
   measurement system and the source's creation time and returns
   ``WeatherReading`` objects in chronological order::

       class MyProvider:
           def current(self, measurement_system, now) -> WeatherReading: ...
           def hourly(self, measurement_system, now) -> list[WeatherReading]: ...
           def daily(self, measurement_system, now) -> list[WeatherReading]: ...

3. Pass it in: ``WeatherDataSource(MeasurementSystem.METRIC, provider=MyProvider())``.

4. Add tests in ``tests/test_{name}.py``.
"""

from wrist_weather.datasources.source import WeatherDataSource, WeatherProvider

__all__ = ["WeatherDataSource", "WeatherProvider"]
