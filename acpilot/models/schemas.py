"""Pydantic schemas for engine inputs and outputs."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from .enums import AcMode, FanLevel, TemperatureUnit


class _FrozenModel(BaseModel):
    # Vendor payloads use camelCase; Python callers use field names
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class TemperatureRange(_FrozenModel):
    min_value: float
    max_value: float
    min_step: float = Field(default=1.0, gt=0)

    @model_validator(mode="after")
    def _check_bounds(self) -> TemperatureRange:
        if self.min_value > self.max_value:
            raise ValueError("min_value must not exceed max_value")
        return self


class AcState(_FrozenModel):
    """Commanded state of the physical unit.

    ``target_temperature`` is always Celsius; conversion to the unit's display
    scale happens when the state is submitted.
    """

    on: bool
    mode: AcMode
    fan_level: FanLevel | None = None
    target_temperature: float
    temperature_unit: TemperatureUnit = TemperatureUnit.celsius


class Measurement(_FrozenModel):
    temperature: float = Field(description="Air temperature in Celsius")
    humidity: float = Field(ge=0, le=100, description="Relative humidity in percent")


class MeasurementTime(_FrozenModel):
    seconds_ago: float
    time: str


class SensorMeasurement(Measurement):
    """Indoor reading annotated with its age as reported by the vendor."""

    time: MeasurementTime


class OutdoorObservation(Measurement):
    """Outdoor air reading from the weather observation feed."""


class Thresholds(_FrozenModel):
    heating_threshold_temperature: float
    cooling_threshold_temperature: float

    @model_validator(mode="after")
    def _check_order(self) -> Thresholds:
        if self.heating_threshold_temperature > self.cooling_threshold_temperature:
            raise ValueError(
                "heating threshold "
                f"({self.heating_threshold_temperature}) exceeds cooling threshold "
                f"({self.cooling_threshold_temperature})"
            )
        return self

    @property
    def midpoint(self) -> float:
        return (self.heating_threshold_temperature + self.cooling_threshold_temperature) / 2


class AutoModeInput(Thresholds):
    room_measurement: Measurement
    bom_observation: OutdoorObservation | None = None
    # Let a goal-directed unit idle instead of picking a new mode
    yield_ac: bool = False


class TargetState(_FrozenModel):
    temperature: float
    humidity: float

    @classmethod
    def from_thresholds(cls, thresholds: Thresholds, *, humidity: float) -> TargetState:
        return cls(temperature=thresholds.midpoint, humidity=humidity)


class UserState(_FrozenModel):
    master_switch: bool = True
    auto_mode: bool = False
    heating_threshold_temperature: float | None = None
    target_temperature: float | None = None
    cooling_threshold_temperature: float | None = None


__all__ = [
    "AcState",
    "AutoModeInput",
    "Measurement",
    "MeasurementTime",
    "OutdoorObservation",
    "SensorMeasurement",
    "TargetState",
    "TemperatureRange",
    "Thresholds",
    "UserState",
]
