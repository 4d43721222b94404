"""Temperature clamping and unit conversion helpers."""

from __future__ import annotations

import math

from acpilot.models.schemas import TemperatureRange


def _round_half_up(value: float) -> int:
    # The vendor rounds .5 upwards; built-in round() would round to even
    return math.floor(value + 0.5)


def clamp_temperature(value: float, temperature_range: TemperatureRange) -> float:
    """Clamp ``value`` into ``temperature_range``.

    Values inside the range are rounded to whole degrees when the range only
    accepts whole-degree steps.
    """

    if value <= temperature_range.min_value:
        return temperature_range.min_value
    if value >= temperature_range.max_value:
        return temperature_range.max_value
    if temperature_range.min_step >= 1.0:
        return _round_half_up(value)
    return value


def fahrenheit_to_celsius(value: float) -> float:
    return (value - 32) / 1.8


def celsius_to_fahrenheit(value: float) -> int:
    return _round_half_up(value * 1.8 + 32)


__all__ = ["celsius_to_fahrenheit", "clamp_temperature", "fahrenheit_to_celsius"]
