"""
Utilitaires et constantes pour videoinfo.

Ce module contient les constantes et fonctions utilitaires partagees.
"""

from videoinfo.utils.constants import (
    BYTES_PER_GB,
    BYTES_PER_KB,
    BYTES_PER_MB,
    SUPPORTED_VIDEO_FORMATS,
)
from videoinfo.utils.helpers import format_duration, format_size, is_valid_format

__all__ = [
    "BYTES_PER_KB",
    "BYTES_PER_MB",
    "BYTES_PER_GB",
    "SUPPORTED_VIDEO_FORMATS",
    "format_duration",
    "format_size",
    "is_valid_format",
]
