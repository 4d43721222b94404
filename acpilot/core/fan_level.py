"""Fan speed selection from temperature deviation."""

from __future__ import annotations

from acpilot.config import Settings, get_settings
from acpilot.models.enums import FanLevel


def fan_level_for_temperature_deviation(
    deviation: float, *, settings: Settings | None = None
) -> FanLevel:
    """Map degrees past the active threshold to a fan level.

    Boundaries belong to the lower tier, so a deviation of exactly 1.0 is
    still ``low``.
    """

    settings = settings or get_settings()
    if deviation > settings.fan_level_strong_deviation:
        return FanLevel.strong
    if deviation > settings.fan_level_high_deviation:
        return FanLevel.high
    if deviation > settings.fan_level_medium_deviation:
        return FanLevel.medium
    return FanLevel.low


__all__ = ["fan_level_for_temperature_deviation"]
