"""Payload decoding for the vendor API and the outdoor observation feed."""

from .errors import InvalidPayloadError, NoDataError, PayloadError
from .payloads import parse_ac_state_history, parse_bom_observation, parse_sensor_measurements

__all__ = [
    "InvalidPayloadError",
    "NoDataError",
    "PayloadError",
    "parse_ac_state_history",
    "parse_bom_observation",
    "parse_sensor_measurements",
]
