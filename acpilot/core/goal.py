"""Goal tracking for the mode the unit is currently running."""

from __future__ import annotations

import logging
from typing import assert_never

from acpilot.config import Settings, get_settings
from acpilot.core.formatting import air_metrics, format_value
from acpilot.core.outdoor_air import (
    OutdoorAirBenefitInput,
    should_start_ingesting,
    should_stop_ingesting,
)
from acpilot.models.enums import AcMode, IngestionMode
from acpilot.models.schemas import AcState, AutoModeInput, TargetState

logger = logging.getLogger(__name__)


def _ingestion_goal(
    log: logging.Logger,
    auto_input: AutoModeInput,
    mode: IngestionMode,
    target: TargetState,
    settings: Settings,
) -> bool | None:
    room = auto_input.room_measurement
    observation = auto_input.bom_observation

    if mode == IngestionMode.dry and room.humidity < settings.humidity_midpoint:
        log.info(
            "Dried (%s) to humidity mid-point (%s)",
            format_value(room.humidity),
            format_value(settings.humidity_midpoint),
        )
        return True

    if observation is None:
        # Without outdoor data there is nothing to judge ingestion against
        return None

    benefit_input = OutdoorAirBenefitInput(
        room_measurement=room, target=target, bom_observation=observation
    )
    if should_stop_ingesting(benefit_input, mode, settings=settings):
        log.info(
            "Outdoor air (%s) is no longer better than indoor (%s)",
            air_metrics(observation),
            air_metrics(room),
        )
        return True

    if should_start_ingesting(benefit_input, settings=settings) == mode:
        return False

    # Idle; defer to the temperature thresholds
    return None


def current_mode_has_reached_goal(
    auto_input: AutoModeInput,
    prev_state: AcState,
    target: TargetState,
    *,
    log: logging.Logger | None = None,
    settings: Settings | None = None,
) -> bool | None:
    """Report progress of the unit's current mode towards its goal.

    Returns a tristate:

    - ``True``: the mode is goal-directed and has reached its goal
    - ``False``: the mode is goal-directed and still has work to do
    - ``None``: the unit is not in a goal-directed state (off, auto, idle fan)
    """

    log = log or logger
    settings = settings or get_settings()

    if not prev_state.on:
        return None

    room = auto_input.room_measurement
    midpoint = auto_input.midpoint
    mode = prev_state.mode

    if mode is AcMode.auto:
        # Only the user can request auto; it has no stopping condition
        return None
    if mode is AcMode.fan or mode is AcMode.dry:
        return _ingestion_goal(log, auto_input, IngestionMode(mode), target, settings)
    if mode is AcMode.heat:
        if room.temperature > midpoint:
            log.info(
                "Heated (%s) to temperature mid-point (%s)",
                format_value(room.temperature),
                format_value(midpoint),
            )
            return True
        return False
    if mode is AcMode.cool:
        if room.temperature < midpoint:
            log.info(
                "Cooled (%s) to temperature mid-point (%s)",
                format_value(room.temperature),
                format_value(midpoint),
            )
            return True
        return False
    assert_never(mode)


__all__ = ["current_mode_has_reached_goal"]
