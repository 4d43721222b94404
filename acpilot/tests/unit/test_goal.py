from __future__ import annotations

import pytest

from acpilot.core.goal import current_mode_has_reached_goal
from acpilot.models.enums import AcMode, FanLevel
from acpilot.models.schemas import (
    AcState,
    AutoModeInput,
    Measurement,
    OutdoorObservation,
    TargetState,
)

TARGET = TargetState(temperature=21.0, humidity=40.0)


def _state(mode: AcMode, *, on: bool = True) -> AcState:
    fan_level = None if mode in (AcMode.dry, AcMode.auto) else FanLevel.low
    return AcState(on=on, mode=mode, fan_level=fan_level, target_temperature=21.0)


def _input(
    temperature: float, humidity: float = 40.0, outdoor: tuple[float, float] | None = None
) -> AutoModeInput:
    return AutoModeInput(
        room_measurement=Measurement(temperature=temperature, humidity=humidity),
        heating_threshold_temperature=19.0,
        cooling_threshold_temperature=23.0,
        bom_observation=(
            OutdoorObservation(temperature=outdoor[0], humidity=outdoor[1]) if outdoor else None
        ),
    )


@pytest.mark.parametrize("mode", list(AcMode))
def test_unit_off_has_no_goal(mode: AcMode) -> None:
    assert current_mode_has_reached_goal(_input(30.0), _state(mode, on=False), TARGET) is None


def test_auto_has_no_goal() -> None:
    assert current_mode_has_reached_goal(_input(30.0), _state(AcMode.auto), TARGET) is None


class TestHeatAndCool:
    def test_heat_still_working_below_midpoint(self) -> None:
        assert current_mode_has_reached_goal(_input(21.0), _state(AcMode.heat), TARGET) is False

    def test_heat_reached_past_midpoint(self, info_messages) -> None:
        assert current_mode_has_reached_goal(_input(21.5), _state(AcMode.heat), TARGET) is True
        assert info_messages() == ["Heated (21.5) to temperature mid-point (21)"]

    def test_cool_still_working_above_midpoint(self) -> None:
        assert current_mode_has_reached_goal(_input(21.0), _state(AcMode.cool), TARGET) is False

    def test_cool_reached_past_midpoint(self, info_messages) -> None:
        assert current_mode_has_reached_goal(_input(20.5), _state(AcMode.cool), TARGET) is True
        assert info_messages() == ["Cooled (20.5) to temperature mid-point (21)"]


class TestIngestion:
    @pytest.mark.parametrize("mode", [AcMode.fan, AcMode.dry])
    def test_cannot_judge_without_observation(self, mode: AcMode) -> None:
        assert current_mode_has_reached_goal(_input(23.0, 60.0), _state(mode), TARGET) is None

    def test_fan_still_working_while_it_would_start(self) -> None:
        auto_input = _input(23.0, 60.0, outdoor=(15.0, 30.0))
        assert current_mode_has_reached_goal(auto_input, _state(AcMode.fan), TARGET) is False

    def test_fan_reached_when_outdoor_air_worse(self, info_messages) -> None:
        auto_input = _input(23.0, 60.0, outdoor=(24.0, 30.0))
        assert current_mode_has_reached_goal(auto_input, _state(AcMode.fan), TARGET) is True
        assert info_messages() == [
            "Outdoor air (24C, 30%) is no longer better than indoor (23C, 60%)"
        ]

    def test_fan_idle_on_small_benefit(self) -> None:
        auto_input = _input(22.0, 45.0, outdoor=(18.0, 42.0))
        assert current_mode_has_reached_goal(auto_input, _state(AcMode.fan), TARGET) is None

    def test_dry_still_working_while_it_would_start(self) -> None:
        auto_input = _input(23.0, 60.0, outdoor=(15.0, 60.0))
        assert current_mode_has_reached_goal(auto_input, _state(AcMode.dry), TARGET) is False

    def test_dry_is_idle_when_fan_would_be_chosen(self) -> None:
        auto_input = _input(23.0, 60.0, outdoor=(15.0, 30.0))
        assert current_mode_has_reached_goal(auto_input, _state(AcMode.dry), TARGET) is None

    def test_dry_reached_below_humidity_midpoint(self, info_messages) -> None:
        assert current_mode_has_reached_goal(_input(22.0, 38.0), _state(AcMode.dry), TARGET) is True
        assert info_messages() == ["Dried (38) to humidity mid-point (40)"]
