"""Hardcoded sample weather.

Stand-in for a real weather API. Values are illustrative, not modelled.

Public API:
  - provider: SampleProvider
  - data: SampleRow, SAMPLE_CURRENT, SAMPLE_HOURLY, SAMPLE_DAILY
"""

from wrist_weather.datasources.sample.data import (
    SAMPLE_CURRENT,
    SAMPLE_DAILY,
    SAMPLE_HOURLY,
    SampleRow,
)
from wrist_weather.datasources.sample.provider import SampleProvider

__all__ = [
    "SAMPLE_CURRENT",
    "SAMPLE_DAILY",
    "SAMPLE_HOURLY",
    "SampleProvider",
    "SampleRow",
]
