"""Auto-mode controller choosing the next air-conditioner state.

The controller is stateless: every decision is derived from the previous unit
state and the current inputs. It returns a new :class:`AcState` to submit, or
``False`` when the unit should be left alone.
"""

from __future__ import annotations

import logging
from typing import Literal

from acpilot.config import Settings, get_settings
from acpilot.core.fan_level import fan_level_for_temperature_deviation
from acpilot.core.formatting import air_metrics, format_value
from acpilot.core.goal import current_mode_has_reached_goal
from acpilot.core.outdoor_air import (
    OutdoorAirBenefitInput,
    can_start_dry_mode,
    should_start_ingesting,
)
from acpilot.core.state import ac_states_equivalent
from acpilot.core.temperature import clamp_temperature
from acpilot.models.enums import AcMode, FanLevel, IngestionMode
from acpilot.models.schemas import AcState, AutoModeInput, TargetState

logger = logging.getLogger(__name__)

NoChange = Literal[False]


def _boost_fan_level(
    auto_input: AutoModeInput, prev_state: AcState, settings: Settings
) -> FanLevel | None:
    """Return a faster fan level when running on low is not keeping up."""

    if not prev_state.on or prev_state.fan_level is not FanLevel.low:
        return None

    room_temperature = auto_input.room_measurement.temperature
    if prev_state.mode is AcMode.heat:
        deviation = auto_input.heating_threshold_temperature - room_temperature
    elif prev_state.mode is AcMode.cool:
        deviation = room_temperature - auto_input.cooling_threshold_temperature
    else:
        return None

    boost_level = fan_level_for_temperature_deviation(deviation, settings=settings)
    if boost_level is FanLevel.low:
        return None
    return boost_level


def _recentre_target(
    log: logging.Logger,
    auto_input: AutoModeInput,
    prev_state: AcState,
    settings: Settings,
) -> AcState | NoChange:
    """Pull a drifted target back to the far threshold while still working.

    A heating unit must aim above the mid-point and a cooling unit below it;
    thresholds edited mid-run can leave the target on the wrong side.
    """

    midpoint = auto_input.midpoint
    target_temperature = prev_state.target_temperature

    if prev_state.mode is AcMode.heat and target_temperature <= midpoint:
        desired = clamp_temperature(
            auto_input.cooling_threshold_temperature, settings.cooling_temperature_range
        )
    elif prev_state.mode is AcMode.cool and target_temperature >= midpoint:
        desired = clamp_temperature(
            auto_input.heating_threshold_temperature, settings.heating_temperature_range
        )
    else:
        return False

    if desired == target_temperature:
        return False

    log.info(
        "Target temperature (%s) is on the wrong side of mid-point (%s) for %s mode; "
        "re-centring to %s",
        format_value(target_temperature),
        format_value(midpoint),
        prev_state.mode,
        format_value(desired),
    )
    return prev_state.model_copy(update={"target_temperature": desired})


def calculate_desired_ac_state(
    auto_input: AutoModeInput,
    prev_state: AcState,
    *,
    log: logging.Logger | None = None,
    settings: Settings | None = None,
) -> AcState | NoChange:
    """Compute the next unit state for auto mode.

    Returns ``False`` when no change is required.
    """

    log = log or logger
    settings = settings or get_settings()

    room = auto_input.room_measurement
    observation = auto_input.bom_observation
    heating_threshold = auto_input.heating_threshold_temperature
    cooling_threshold = auto_input.cooling_threshold_temperature
    target = TargetState.from_thresholds(auto_input, humidity=settings.humidity_midpoint)

    log.debug(
        "Calculating desired state (roomTemp: %s, roomHumid: %s, outdoorTemp: %s, "
        "outdoorHumid: %s, mode: %s, heatingThresh: %s, coolingThresh: %s)",
        room.temperature,
        room.humidity,
        observation.temperature if observation else "unknown",
        observation.humidity if observation else "unknown",
        prev_state.mode if prev_state.on else "off",
        heating_threshold,
        cooling_threshold,
    )

    boost_level = _boost_fan_level(auto_input, prev_state, settings)
    if boost_level is not None:
        verb = "Heating" if prev_state.mode is AcMode.heat else "Cooling"
        log.info("%s on low is ineffective; boosting to %s", verb, boost_level)
        return prev_state.model_copy(update={"fan_level": boost_level})

    has_reached_goal = current_mode_has_reached_goal(
        auto_input, prev_state, target, log=log, settings=settings
    )

    if has_reached_goal is False:
        # Still working towards the goal
        return _recentre_target(log, auto_input, prev_state, settings)

    if auto_input.yield_ac:
        if has_reached_goal is True:
            log.info("Yielding; switching off")
            return prev_state.model_copy(update={"on": False})
        return False

    if room.temperature > cooling_threshold:
        log.info(
            "Hotter (%s) than cooling threshold (%s), starting cool mode",
            format_value(room.temperature),
            format_value(cooling_threshold),
        )
        return prev_state.model_copy(
            update={
                "on": True,
                "mode": AcMode.cool,
                "fan_level": fan_level_for_temperature_deviation(
                    room.temperature - cooling_threshold, settings=settings
                ),
                "target_temperature": clamp_temperature(
                    heating_threshold, settings.cooling_temperature_range
                ),
            }
        )

    if room.temperature < heating_threshold:
        log.info(
            "Colder (%s) than heating threshold (%s), starting heat mode",
            format_value(room.temperature),
            format_value(heating_threshold),
        )
        return prev_state.model_copy(
            update={
                "on": True,
                "mode": AcMode.heat,
                "fan_level": fan_level_for_temperature_deviation(
                    heating_threshold - room.temperature, settings=settings
                ),
                "target_temperature": clamp_temperature(
                    cooling_threshold, settings.heating_temperature_range
                ),
            }
        )

    benefit_input = (
        OutdoorAirBenefitInput(room_measurement=room, target=target, bom_observation=observation)
        if observation is not None
        else None
    )

    if room.humidity > settings.drying_humidity_threshold and (
        observation is None or can_start_dry_mode(observation, settings=settings)
    ):
        next_state = prev_state.model_copy(
            update={"on": True, "mode": AcMode.dry, "fan_level": None}
        )
        if ac_states_equivalent(prev_state, next_state):
            return False
        log.info(
            "More humid (%s) than drying threshold (%s), starting dry mode",
            format_value(room.humidity),
            format_value(settings.drying_humidity_threshold),
        )
        return next_state

    if benefit_input is not None:
        ingestion_mode = should_start_ingesting(benefit_input, settings=settings)
        if ingestion_mode is not None and not (
            prev_state.on and prev_state.mode == ingestion_mode
        ):
            log.info(
                "Outdoor air (%s) better than indoor (%s), starting %s mode",
                air_metrics(benefit_input.bom_observation),
                air_metrics(room),
                ingestion_mode,
            )
            return prev_state.model_copy(
                update={
                    "on": True,
                    "mode": AcMode(ingestion_mode),
                    "fan_level": FanLevel.low if ingestion_mode is IngestionMode.fan else None,
                }
            )

    if has_reached_goal is True:
        log.info("Reached goal with nothing else to do; switching off")
        return prev_state.model_copy(update={"on": False})

    # Nothing to do
    return False


__all__ = ["NoChange", "calculate_desired_ac_state"]
