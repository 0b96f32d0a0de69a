"""
Tests unitaires pour les fonctions utilitaires de formatage.

Tests couvrant:
- is_valid_format (appartenance exacte)
- format_size (selection de l'unite binaire)
- format_duration (H:MM:SS tronque)
"""

import pytest

from videoinfo.utils import (
    SUPPORTED_VIDEO_FORMATS,
    format_duration,
    format_size,
    is_valid_format,
)


class TestIsValidFormat:
    """Tests pour is_valid_format."""

    def test_supported_format_accepted(self) -> None:
        assert is_valid_format(".mp4", SUPPORTED_VIDEO_FORMATS)

    def test_every_supported_format_accepted(self) -> None:
        for fmt in (".mp4", ".mkv", ".avi", ".mov"):
            assert is_valid_format(fmt, SUPPORTED_VIDEO_FORMATS)

    def test_unknown_format_rejected(self) -> None:
        assert not is_valid_format(".wmv", SUPPORTED_VIDEO_FORMATS)

    def test_comparison_is_case_sensitive(self) -> None:
        """.MP4 n'est pas .mp4."""
        assert not is_valid_format(".MP4", SUPPORTED_VIDEO_FORMATS)

    def test_leading_dot_required(self) -> None:
        assert not is_valid_format("mp4", SUPPORTED_VIDEO_FORMATS)

    def test_empty_format_rejected(self) -> None:
        assert not is_valid_format("", SUPPORTED_VIDEO_FORMATS)

    def test_accepts_any_iterable(self) -> None:
        assert is_valid_format(".webm", iter([".webm"]))


class TestFormatSize:
    """Tests pour format_size : seuils exacts a 1024, 1024^2, 1024^3."""

    def test_bytes_below_one_kb(self) -> None:
        assert format_size(1023) == "1023 bytes"

    def test_zero_bytes(self) -> None:
        assert format_size(0) == "0 bytes"

    def test_exactly_one_kb(self) -> None:
        assert format_size(1024) == "1.00 KB"

    def test_one_and_a_half_kb(self) -> None:
        assert format_size(1536) == "1.50 KB"

    def test_just_below_one_mb_stays_kb(self) -> None:
        assert format_size(1024**2 - 1).endswith(" KB")

    def test_exactly_one_mb(self) -> None:
        assert format_size(1024**2) == "1.00 MB"

    def test_ten_mb(self) -> None:
        assert format_size(10485760) == "10.00 MB"

    def test_just_below_one_gb_stays_mb(self) -> None:
        assert format_size(1024**3 - 1).endswith(" MB")

    def test_exactly_one_gb(self) -> None:
        assert format_size(1024**3) == "1.00 GB"

    def test_large_size_stays_gb(self) -> None:
        """Pas d'unite au-dela du GB."""
        assert format_size(5 * 1024**4) == "5120.00 GB"

    def test_fractional_bytes(self) -> None:
        assert format_size(512.5) == "512.5 bytes"


class TestFormatDuration:
    """Tests pour format_duration."""

    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [
            (0, "0:00:00"),
            (59, "0:00:59"),
            (60, "0:01:00"),
            (125, "0:02:05"),
            (3599, "0:59:59"),
            (3600, "1:00:00"),
            (3725, "1:02:05"),
            (36000, "10:00:00"),
        ],
    )
    def test_formats_hours_minutes_seconds(self, seconds: int, expected: str) -> None:
        assert format_duration(seconds) == expected

    def test_fractional_seconds_truncated(self) -> None:
        """59.99 secondes -> 0:00:59 (troncature, pas d'arrondi)."""
        assert format_duration(59.99) == "0:00:59"

    def test_hours_not_padded(self) -> None:
        assert format_duration(2 * 3600 + 5) == "2:00:05"
