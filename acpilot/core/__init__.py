"""Decision logic for the auto-mode air-conditioner controller."""

from __future__ import annotations

from .auto_controller import NoChange, calculate_desired_ac_state
from .fan_level import fan_level_for_temperature_deviation
from .goal import current_mode_has_reached_goal
from .outdoor_air import (
    OutdoorAirBenefitInput,
    can_start_dry_mode,
    metric_is_beneficial,
    should_start_ingesting,
    should_stop_ingesting,
)
from .polling import poll_next_measurement_in_ms, poll_next_observation_in_ms
from .state import (
    ac_states_equivalent,
    clamp_user_state,
    from_vendor_ac_state,
    to_vendor_ac_state,
    user_states_equivalent,
)
from .temperature import celsius_to_fahrenheit, clamp_temperature, fahrenheit_to_celsius

__all__ = [
    "NoChange",
    "OutdoorAirBenefitInput",
    "ac_states_equivalent",
    "calculate_desired_ac_state",
    "can_start_dry_mode",
    "celsius_to_fahrenheit",
    "clamp_temperature",
    "clamp_user_state",
    "current_mode_has_reached_goal",
    "fahrenheit_to_celsius",
    "fan_level_for_temperature_deviation",
    "from_vendor_ac_state",
    "metric_is_beneficial",
    "poll_next_measurement_in_ms",
    "poll_next_observation_in_ms",
    "should_start_ingesting",
    "should_stop_ingesting",
    "to_vendor_ac_state",
    "user_states_equivalent",
]
