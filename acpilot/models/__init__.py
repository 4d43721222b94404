"""Data models shared by the decision engine and its collaborators."""

from __future__ import annotations

from .enums import AcMode, FanLevel, IngestionMode, TemperatureUnit
from .schemas import (
    AcState,
    AutoModeInput,
    Measurement,
    MeasurementTime,
    OutdoorObservation,
    SensorMeasurement,
    TargetState,
    TemperatureRange,
    Thresholds,
    UserState,
)

__all__ = [
    "AcMode",
    "AcState",
    "AutoModeInput",
    "FanLevel",
    "IngestionMode",
    "Measurement",
    "MeasurementTime",
    "OutdoorObservation",
    "SensorMeasurement",
    "TargetState",
    "TemperatureRange",
    "TemperatureUnit",
    "Thresholds",
    "UserState",
]
