"""
Tests unitaires pour la configuration loguru.
"""

import json
from pathlib import Path

import pytest
from loguru import logger

from videoinfo.logging_config import configure_logging, resolve_log_level


class TestResolveLogLevel:
    """Tests pour resolve_log_level."""

    def test_default_level(self) -> None:
        assert resolve_log_level("WARNING") == "WARNING"

    @pytest.mark.parametrize(("verbose", "expected"), [(1, "INFO"), (2, "DEBUG"), (5, "DEBUG")])
    def test_verbose_levels(self, verbose: int, expected: str) -> None:
        assert resolve_log_level("WARNING", verbose=verbose) == expected

    def test_quiet_wins_over_verbose(self) -> None:
        assert resolve_log_level("DEBUG", verbose=2, quiet=True) == "ERROR"


class TestConfigureLogging:
    """Tests pour configure_logging."""

    def test_console_only_by_default(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_level="INFO")
        logger.debug("cache")
        logger.info("visible")

        captured = capsys.readouterr()
        assert "visible" in captured.err
        assert "cache" not in captured.err
        assert captured.out == ""

    def test_file_sink_is_json(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "videoinfo.log"
        configure_logging(log_level="ERROR", log_file=log_file)
        logger.debug("Champ accepte", field="duration")
        logger.remove()

        records = [json.loads(line) for line in log_file.read_text().splitlines()]
        messages = [record["record"]["message"] for record in records]
        assert "Champ accepte" in messages
        accepted = next(r for r in records if r["record"]["message"] == "Champ accepte")
        assert accepted["record"]["extra"]["field"] == "duration"
