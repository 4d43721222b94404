"""Decode vendor and weather-feed bodies into engine models.

Fetching is owned by the I/O collaborators; this module only turns their
decoded JSON into typed values. A failure here means "no new information this
cycle" to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from acpilot.core.state import from_vendor_ac_state
from acpilot.models.schemas import AcState, OutdoorObservation, SensorMeasurement

from .errors import InvalidPayloadError, NoDataError

logger = logging.getLogger(__name__)

_SUCCESS = "success"


def _vendor_result(body: Any, context: str) -> list[Any]:
    if not isinstance(body, Mapping):
        raise InvalidPayloadError(f"{context}: unexpected body type {type(body).__name__}")
    if body.get("status") != _SUCCESS:
        raise InvalidPayloadError(f"{context}: status {body.get('status')!r}")
    result = body.get("result")
    if not isinstance(result, list):
        raise InvalidPayloadError(f"{context}: result is not a list")
    return result


def parse_bom_observation(body: Any) -> OutdoorObservation:
    """Return the most recent row of a weather observation feed.

    Rows carry ``air_temp`` and ``rel_hum`` as numeric strings, newest first.
    """

    if not isinstance(body, Mapping):
        raise InvalidPayloadError(f"Unexpected observation body type {type(body).__name__}")

    try:
        rows = body["observations"]["data"]
    except (KeyError, TypeError) as exc:
        raise InvalidPayloadError("Observation body has no observations.data") from exc

    if not isinstance(rows, list):
        raise InvalidPayloadError("observations.data is not a list")
    if not rows:
        raise NoDataError("No observations found")

    latest = rows[0]
    try:
        return OutdoorObservation(
            temperature=float(latest["air_temp"]),
            humidity=float(latest["rel_hum"]),
        )
    except (KeyError, TypeError, ValueError, ValidationError) as exc:
        raise InvalidPayloadError(f"Unusable observation row: {latest!r}") from exc


def parse_sensor_measurements(body: Any) -> list[SensorMeasurement]:
    """Decode a measurements response, newest first, skipping bad rows."""

    measurements: list[SensorMeasurement] = []
    for row in _vendor_result(body, "measurements"):
        try:
            measurements.append(SensorMeasurement.model_validate(row))
        except ValidationError:
            logger.warning("Skipping malformed measurement", extra={"row": row})
    return measurements


def parse_ac_state_history(body: Any) -> AcState | None:
    """Return the newest successfully applied state from a state history.

    The vendor keeps failed submissions in the history, so the first entry
    with status ``Success`` wins. Returns None when none succeeded.
    """

    for entry in _vendor_result(body, "acStates"):
        if not isinstance(entry, Mapping) or entry.get("status") != "Success":
            continue
        ac_state = entry.get("acState")
        if not isinstance(ac_state, Mapping):
            raise InvalidPayloadError("acStates: successful entry has no acState")
        try:
            return from_vendor_ac_state(ac_state)
        except ValidationError as exc:
            raise InvalidPayloadError(f"acStates: unusable acState {dict(ac_state)!r}") from exc
    return None


__all__ = ["parse_ac_state_history", "parse_bom_observation", "parse_sensor_measurements"]
