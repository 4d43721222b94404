"""Engine configuration powered by Pydantic settings."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Final

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from acpilot.models.schemas import TemperatureRange

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseSettings):
    """Centralized tuning constants with environment fallbacks."""

    model_config = SettingsConfigDict(env_prefix="ACPILOT_", env_file=".env", extra="ignore")

    debug: bool = False
    log_level: str = Field(default="info")

    # Humidity goals (relative humidity, %)
    humidity_midpoint: float = Field(default=40.0, ge=0, le=100)
    drying_humidity_threshold: float = Field(default=60.0, ge=0, le=100)

    # Outdoor-air hysteresis margins
    start_temperature_margin: float = Field(default=1.0, ge=0)
    start_humidity_margin: float = Field(default=5.0, ge=0)
    stop_margin: float = Field(default=0.0, ge=0)
    # Dry mode is assumed to remove this fraction of the ingested moisture
    dry_humidity_factor: float = Field(default=0.5, gt=0, le=1)
    # Outdoor air too humid or too cold to be worth drying the room with
    dry_start_max_outdoor_humidity: float = Field(default=85.0, ge=0, le=100)
    dry_start_min_outdoor_temperature: float = 15.0

    # Fan tiers by degrees past the active threshold
    fan_level_medium_deviation: float = 1.0
    fan_level_high_deviation: float = 4.0
    fan_level_strong_deviation: float = 7.0

    # What the unit accepts per mode, and what the user may pick
    heating_temperature_range: TemperatureRange = Field(
        default_factory=lambda: TemperatureRange(min_value=10, max_value=30, min_step=1)
    )
    cooling_temperature_range: TemperatureRange = Field(
        default_factory=lambda: TemperatureRange(min_value=18, max_value=30, min_step=1)
    )
    auto_temperature_range: TemperatureRange = Field(
        default_factory=lambda: TemperatureRange(min_value=16, max_value=30, min_step=0.5)
    )

    # Poll arithmetic consumed by the scheduling collaborator
    minimum_poll_interval_secs: int = Field(default=30, gt=0)
    measurement_interval_secs: int = Field(default=90, gt=0)
    observation_publish_delay_mins: float = Field(default=4.0, ge=0)
    observation_jitter_mins: float = Field(default=2.0, ge=0)

    @model_validator(mode="after")
    def _check_fan_tiers(self) -> Settings:
        if not (
            self.fan_level_medium_deviation
            < self.fan_level_high_deviation
            < self.fan_level_strong_deviation
        ):
            raise ValueError("fan level deviations must be strictly increasing")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Install the root logging handler used by hosting processes."""

    settings = settings or get_settings()
    if settings.debug:
        level = logging.DEBUG
    else:
        level = logging.getLevelName(settings.log_level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


SETTINGS: Final[Settings] = get_settings()
