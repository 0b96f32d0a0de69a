"""
Tests unitaires pour Settings.

Verifie les valeurs par defaut, la surcharge par variables d'environnement
et la validation des champs.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from videoinfo.config import Settings


class TestSettings:
    """Tests pour la configuration pydantic-settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in (
            "VIDEOINFO_LOG_LEVEL",
            "VIDEOINFO_LOG_FILE",
            "VIDEOINFO_MAX_INPUT_ATTEMPTS",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = Settings()

        assert settings.log_level == "WARNING"
        assert settings.log_file is None
        assert settings.log_rotation_size == "10 MB"
        assert settings.log_retention_count == 5
        assert settings.max_input_attempts is None

    def test_environment_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VIDEOINFO_LOG_LEVEL", "debug")
        monkeypatch.setenv("VIDEOINFO_MAX_INPUT_ATTEMPTS", "4")

        settings = Settings()

        assert settings.log_level == "DEBUG"
        assert settings.max_input_attempts == 4

    def test_log_file_expands_home(self) -> None:
        settings = Settings(log_file="~/videoinfo.log")
        assert settings.log_file == Path("~/videoinfo.log").expanduser()

    def test_empty_log_file_is_none(self) -> None:
        assert Settings(log_file="").log_file is None

    def test_max_input_attempts_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Settings(max_input_attempts=0)
