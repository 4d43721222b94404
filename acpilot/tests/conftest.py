import logging
import os
import sys
from pathlib import Path

import pytest

BASE_DIR = Path(__file__).resolve().parents[2]
if str(BASE_DIR) not in sys.path:
    sys.path.append(str(BASE_DIR))

from acpilot.config import Settings, get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Keep ambient ACPILOT_* variables and any local .env out of get_settings()."""
    for name in list(os.environ):
        if name.upper().startswith("ACPILOT_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Default settings, isolated from any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def info_messages(caplog: pytest.LogCaptureFixture):
    """Return a callable listing the INFO rationale messages logged so far."""
    caplog.set_level(logging.DEBUG, logger="acpilot")

    def _messages() -> list[str]:
        return [r.getMessage() for r in caplog.records if r.levelno == logging.INFO]

    return _messages
