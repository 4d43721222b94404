"""Rendering helpers for rationale log messages."""

from __future__ import annotations

from acpilot.models.schemas import Measurement


def format_value(value: float) -> str:
    """Render a reading without a trailing ``.0`` (``18.0`` -> ``18``)."""

    return f"{value:g}"


def air_metrics(measurement: Measurement) -> str:
    return f"{format_value(measurement.temperature)}C, {format_value(measurement.humidity)}%"


__all__ = ["air_metrics", "format_value"]
