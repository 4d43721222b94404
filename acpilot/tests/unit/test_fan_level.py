from __future__ import annotations

import pytest

from acpilot.config import Settings
from acpilot.core.fan_level import fan_level_for_temperature_deviation
from acpilot.models.enums import FanLevel


@pytest.mark.parametrize(
    ("deviation", "expected"),
    [
        (0.0, FanLevel.low),
        (0.5, FanLevel.low),
        (1.0, FanLevel.low),
        (2.0, FanLevel.medium),
        (4.0, FanLevel.medium),
        (5.0, FanLevel.high),
        (7.0, FanLevel.high),
        (8.0, FanLevel.strong),
    ],
)
def test_fan_level_escalates_with_deviation(deviation: float, expected: FanLevel) -> None:
    assert fan_level_for_temperature_deviation(deviation) is expected


def test_negative_deviation_is_low() -> None:
    assert fan_level_for_temperature_deviation(-3.0) is FanLevel.low


def test_tiers_follow_injected_settings() -> None:
    settings = Settings(
        _env_file=None,
        fan_level_medium_deviation=0.5,
        fan_level_high_deviation=1.5,
        fan_level_strong_deviation=2.5,
    )
    assert fan_level_for_temperature_deviation(1.0, settings=settings) is FanLevel.medium
    assert fan_level_for_temperature_deviation(2.0, settings=settings) is FanLevel.high
    assert fan_level_for_temperature_deviation(3.0, settings=settings) is FanLevel.strong
