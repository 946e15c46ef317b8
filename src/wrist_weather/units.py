"""Unit conversion functions.

Pure integer conversions with no external dependencies. Every result is
truncated toward zero, so a Celsius -> Fahrenheit -> Celsius round trip can
drift by one degree (16°C -> 60°F -> 15°C).
"""

from __future__ import annotations

KM_PER_MILE = 1.60934


def celsius_to_fahrenheit(celsius: int) -> int:
    """Convert Celsius to Fahrenheit."""
    return int(celsius * 9 / 5 + 32)


def fahrenheit_to_celsius(fahrenheit: int) -> int:
    """Convert Fahrenheit to Celsius."""
    return int((fahrenheit - 32) * 5 / 9)


def identity(value: int) -> int:
    """Return the value unchanged (metric display)."""
    return value


def km_to_miles(km: int) -> int:
    """Convert kilometres (or km/h) to miles (or mph)."""
    return int(km / KM_PER_MILE)


def miles_to_km(miles: int) -> int:
    """Convert miles (or mph) to kilometres (or km/h)."""
    return int(miles * KM_PER_MILE)
