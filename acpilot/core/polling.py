"""Poll interval arithmetic for the measurement and observation collaborators."""

from __future__ import annotations

import logging
import math
import random
from datetime import UTC, datetime

from acpilot.config import Settings, get_settings
from acpilot.models.schemas import SensorMeasurement

logger = logging.getLogger(__name__)

_MINUTE_MS = 60 * 1000
_HALF_HOUR_MS = 30 * _MINUTE_MS


def poll_next_measurement_in_ms(
    prev_measurement: SensorMeasurement | None = None,
    *,
    settings: Settings | None = None,
) -> int:
    """Milliseconds until the vendor should have published a fresh measurement.

    The vendor samples on a fixed interval; polling one second after the next
    sample is due avoids fetching the same reading twice.
    """

    settings = settings or get_settings()
    minimum_ms = settings.minimum_poll_interval_secs * 1000

    if prev_measurement is None:
        return minimum_ms

    seconds_ago = prev_measurement.time.seconds_ago
    interval = settings.measurement_interval_secs
    if not math.isfinite(seconds_ago) or seconds_ago < 0 or seconds_ago > interval:
        logger.warning("Unexpected measurement age: %s", seconds_ago)
        return minimum_ms

    return int((interval - (seconds_ago % interval) + 1) * 1000)


def poll_next_observation_in_ms(
    now: datetime | None = None,
    *,
    rng: random.Random | None = None,
    settings: Settings | None = None,
) -> int:
    """Milliseconds until the next half-hourly outdoor observation is published.

    Jitter spreads requests from many units against the shared feed.
    """

    settings = settings or get_settings()
    now = now or datetime.now(UTC)
    rng = rng or random.Random()

    epoch_ms = now.timestamp() * 1000
    until_half_hour = math.ceil(epoch_ms / _HALF_HOUR_MS) * _HALF_HOUR_MS - epoch_ms
    delay = (
        settings.observation_publish_delay_mins * _MINUTE_MS
        + rng.random() * settings.observation_jitter_mins * _MINUTE_MS
    )
    return math.ceil(until_half_hour + delay)


__all__ = ["poll_next_measurement_in_ms", "poll_next_observation_in_ms"]
