"""Tests for settings and logging setup."""

import pytest
from pydantic import ValidationError

from catalog_api.infrastructure.config import Settings
from catalog_api.infrastructure.logging import configure_logging


class TestLogLevel:
    """Tests for the log_level setting."""

    def test_case_insensitive(self) -> None:
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_unknown_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(log_level="verbose")

    def test_unknown_level_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "loud")
        with pytest.raises(ValidationError):
            Settings()

    def test_configure_logging_accepts_every_level(self) -> None:
        for level in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"):
            configure_logging(Settings(log_level=level, log_json=True))
