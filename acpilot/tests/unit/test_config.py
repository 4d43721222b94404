"""Unit tests for acpilot.config."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from acpilot.config import Settings, configure_logging, get_settings


class TestSettings:
    def test_defaults(self, settings: Settings) -> None:
        assert settings.humidity_midpoint == 40
        assert settings.drying_humidity_threshold == 60
        assert settings.start_temperature_margin == 1.0
        assert settings.start_humidity_margin == 5.0
        assert settings.cooling_temperature_range.min_value == 18
        assert settings.auto_temperature_range.min_step == 0.5

    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ACPILOT_DRYING_HUMIDITY_THRESHOLD", "65")
        monkeypatch.setenv("ACPILOT_LOG_LEVEL", "warning")
        settings = Settings(_env_file=None)
        assert settings.drying_humidity_threshold == 65
        assert settings.log_level == "warning"

    def test_nested_range_from_json(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(
            "ACPILOT_HEATING_TEMPERATURE_RANGE",
            '{"min_value": 16, "max_value": 28, "min_step": 0.5}',
        )
        settings = Settings(_env_file=None)
        assert settings.heating_temperature_range.max_value == 28

    def test_fan_tiers_must_increase(self) -> None:
        with pytest.raises(ValidationError, match="strictly increasing"):
            Settings(_env_file=None, fan_level_high_deviation=8.0)

    def test_humidity_bounds(self) -> None:
        with pytest.raises(ValidationError):
            Settings(_env_file=None, humidity_midpoint=120)


class TestGetSettings:
    def test_starts_from_defaults(self) -> None:
        assert get_settings() == Settings(_env_file=None)

    def test_cached_until_cleared(self, monkeypatch: pytest.MonkeyPatch) -> None:
        first = get_settings()
        monkeypatch.setenv("ACPILOT_HUMIDITY_MIDPOINT", "45")
        assert get_settings() is first

        get_settings.cache_clear()
        assert get_settings().humidity_midpoint == 45

    def test_reads_dotenv_from_working_directory(self, tmp_path) -> None:
        (tmp_path / ".env").write_text("ACPILOT_STOP_MARGIN=0.5\n")
        get_settings.cache_clear()
        assert get_settings().stop_margin == 0.5


class TestConfigureLogging:
    @pytest.fixture
    def basic_config(self, monkeypatch: pytest.MonkeyPatch) -> dict:
        calls: dict = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
        return calls

    def test_debug_wins(self, basic_config: dict) -> None:
        configure_logging(Settings(_env_file=None, debug=True, log_level="error"))
        assert basic_config["level"] == logging.DEBUG

    def test_named_level(self, basic_config: dict) -> None:
        configure_logging(Settings(_env_file=None, log_level="warning"))
        assert basic_config["level"] == logging.WARNING
        assert "%(name)s" in basic_config["format"]

    def test_unknown_level_falls_back_to_info(self, basic_config: dict) -> None:
        configure_logging(Settings(_env_file=None, log_level="chatty"))
        assert basic_config["level"] == logging.INFO
