"""Comparison and vendor conversion helpers for unit and user state."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from acpilot.config import Settings, get_settings
from acpilot.core.temperature import (
    celsius_to_fahrenheit,
    clamp_temperature,
    fahrenheit_to_celsius,
)
from acpilot.models.enums import TemperatureUnit
from acpilot.models.schemas import AcState, UserState

_USER_STATE_FIELDS = (
    "master_switch",
    "auto_mode",
    "heating_threshold_temperature",
    "target_temperature",
    "cooling_threshold_temperature",
)
_USER_TEMPERATURE_FIELDS = _USER_STATE_FIELDS[2:]


def ac_states_equivalent(left: AcState, right: AcState) -> bool:
    """Return True when submitting ``right`` over ``left`` would change nothing."""

    if not left.on and not right.on:
        # The remaining values are irrelevant while the unit is off
        return True

    return (
        left.mode == right.mode
        and left.target_temperature == right.target_temperature
        and left.on == right.on
        and left.fan_level == right.fan_level
    )


def _is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)


def user_states_equivalent(left: UserState, right: UserState) -> bool:
    for name in _USER_STATE_FIELDS:
        left_value = getattr(left, name)
        right_value = getattr(right, name)
        if _is_nan(left_value) and _is_nan(right_value):
            continue
        if left_value != right_value:
            return False
    return True


def to_vendor_ac_state(state: AcState) -> dict[str, Any]:
    """Build the ``acState`` body the vendor API expects.

    The vendor reads ``targetTemperature`` in the unit's display scale, so
    Celsius targets are converted when the unit is set to Fahrenheit.
    """

    payload: dict[str, Any] = {
        "on": state.on,
        "mode": str(state.mode),
        "targetTemperature": (
            celsius_to_fahrenheit(state.target_temperature)
            if state.temperature_unit is TemperatureUnit.fahrenheit
            else state.target_temperature
        ),
        "temperatureUnit": str(state.temperature_unit),
    }
    if state.fan_level is not None:
        payload["fanLevel"] = str(state.fan_level)
    return payload


def from_vendor_ac_state(payload: Mapping[str, Any]) -> AcState:
    """Parse a vendor ``acState`` body, normalising the target to Celsius.

    Raises ``pydantic.ValidationError`` for bodies missing required fields.
    """

    state = AcState.model_validate(dict(payload))
    if state.temperature_unit is TemperatureUnit.fahrenheit:
        state = state.model_copy(
            update={"target_temperature": fahrenheit_to_celsius(state.target_temperature)}
        )
    return state


def clamp_user_state(state: UserState, *, settings: Settings | None = None) -> UserState:
    """Clamp user-picked temperatures into the range offered for auto mode."""

    settings = settings or get_settings()
    update: dict[str, float] = {}
    for name in _USER_TEMPERATURE_FIELDS:
        value = getattr(state, name)
        if value is not None:
            update[name] = clamp_temperature(value, settings.auto_temperature_range)
    return state.model_copy(update=update)


__all__ = [
    "ac_states_equivalent",
    "clamp_user_state",
    "from_vendor_ac_state",
    "to_vendor_ac_state",
    "user_states_equivalent",
]
