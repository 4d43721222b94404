"""Decide whether outdoor air can stand in for mechanical conditioning.

Ingesting outdoor air (``fan`` mode, or ``dry`` mode which also strips some of
the moisture) is only worthwhile when it improves temperature and humidity at
the same time. Starting requires a wider margin than stopping so that readings
hovering near the boundary do not flip the unit back and forth.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from acpilot.config import Settings, get_settings
from acpilot.models.enums import IngestionMode
from acpilot.models.schemas import Measurement, OutdoorObservation, TargetState

Metric = Literal["temperature", "humidity"]


@dataclass(slots=True)
class OutdoorAirBenefitInput:
    room_measurement: Measurement
    target: TargetState
    bom_observation: OutdoorObservation


def metric_is_beneficial(room: float, target: float, outdoor: float, threshold: float) -> bool:
    """Return True when outdoor air moves ``room`` towards ``target``.

    The room must be off target by more than ``threshold`` and the outdoor
    value must be better than the room by more than ``threshold``, on the same
    side. Outdoor air that merely differs from the room is not enough.
    """

    return (room - target > threshold and room - outdoor > threshold) or (
        target - room > threshold and outdoor - room > threshold
    )


def _ingested_value(
    benefit_input: OutdoorAirBenefitInput,
    metric: Metric,
    mode: IngestionMode,
    settings: Settings,
) -> float:
    if metric == "humidity" and mode == IngestionMode.dry:
        return benefit_input.bom_observation.humidity * settings.dry_humidity_factor
    return getattr(benefit_input.bom_observation, metric)


def _is_beneficial(
    benefit_input: OutdoorAirBenefitInput,
    metric: Metric,
    mode: IngestionMode,
    threshold: float,
    settings: Settings,
) -> bool:
    return metric_is_beneficial(
        getattr(benefit_input.room_measurement, metric),
        getattr(benefit_input.target, metric),
        _ingested_value(benefit_input, metric, mode, settings),
        threshold,
    )


def should_start_ingesting(
    benefit_input: OutdoorAirBenefitInput, *, settings: Settings | None = None
) -> IngestionMode | None:
    """Pick the ingestion mode worth starting, or None."""

    settings = settings or get_settings()

    if not _is_beneficial(
        benefit_input,
        "temperature",
        IngestionMode.fan,
        settings.start_temperature_margin,
        settings,
    ):
        # Outdoor air cannot help the temperature; nothing to gain
        return None

    if _is_beneficial(
        benefit_input, "humidity", IngestionMode.fan, settings.start_humidity_margin, settings
    ):
        return IngestionMode.fan

    if benefit_input.room_measurement.temperature > benefit_input.target.temperature and (
        _is_beneficial(
            benefit_input, "humidity", IngestionMode.dry, settings.start_humidity_margin, settings
        )
    ):
        # Dry mode compensates for humid outdoor air while cooling
        return IngestionMode.dry

    return None


def should_stop_ingesting(
    benefit_input: OutdoorAirBenefitInput,
    mode: IngestionMode,
    *,
    settings: Settings | None = None,
) -> bool:
    settings = settings or get_settings()
    return not _is_beneficial(
        benefit_input, "temperature", mode, settings.stop_margin, settings
    ) or not _is_beneficial(benefit_input, "humidity", mode, settings.stop_margin, settings)


def can_start_dry_mode(
    observation: OutdoorObservation, *, settings: Settings | None = None
) -> bool:
    """Return True when outdoor air is mild and dry enough to start drying.

    Only the outdoor reading matters; the room's temperature does not.
    """

    settings = settings or get_settings()
    return (
        observation.humidity <= settings.dry_start_max_outdoor_humidity
        and observation.temperature >= settings.dry_start_min_outdoor_temperature
    )


__all__ = [
    "OutdoorAirBenefitInput",
    "can_start_dry_mode",
    "metric_is_beneficial",
    "should_start_ingesting",
    "should_stop_ingesting",
]
