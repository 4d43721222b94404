"""Domain enums for air-conditioner state."""

from enum import StrEnum


class AcMode(StrEnum):
    heat = "heat"
    cool = "cool"
    fan = "fan"
    dry = "dry"
    auto = "auto"


class FanLevel(StrEnum):
    auto = "auto"
    low = "low"
    medium_low = "medium_low"
    medium = "medium"
    medium_high = "medium_high"
    high = "high"
    strong = "strong"


class TemperatureUnit(StrEnum):
    celsius = "C"
    fahrenheit = "F"


class IngestionMode(StrEnum):
    """Modes that can draw outdoor air in place of mechanical conditioning."""

    fan = "fan"
    dry = "dry"
