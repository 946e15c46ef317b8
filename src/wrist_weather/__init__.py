"""Wrist Weather - weather readings for a watch face.

Architecture::

    units.py       Integer unit conversions (°C/°F, km/mi), truncating
    schemas.py     Readings, intervals, conditions and label formatting
    datasources/   WeatherDataSource and the providers that fill it
    renderers/     Pure data -> text/HTML for the watch face
    config.py      Settings from environment / .env
    cli.py         Command-line entry point

Data flow: provider -> WeatherDataSource -> renderers

Extension points:
  - New weather provider:  datasources/__init__.py
  - New display:           renderers/__init__.py
"""

__version__ = "0.1.0"

from wrist_weather.config import Settings
from wrist_weather.datasources import WeatherDataSource
from wrist_weather.schemas import MeasurementSystem, WeatherCondition, WeatherReading

__all__ = [
    "MeasurementSystem",
    "Settings",
    "WeatherCondition",
    "WeatherDataSource",
    "WeatherReading",
    "__version__",
]
