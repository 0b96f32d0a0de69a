"""
Services applicatifs de videoinfo.

- FieldCollector : collecte des champs video depuis une source d'entree
- ReportService : construction du VideoFile et production du rapport
"""

from videoinfo.services.field_collector import (
    VIDEO_FIELD_SPECS,
    FieldCollector,
    FieldSpec,
    FieldState,
)
from videoinfo.services.report import ReportOutcome, ReportService

__all__ = [
    "VIDEO_FIELD_SPECS",
    "FieldCollector",
    "FieldSpec",
    "FieldState",
    "ReportOutcome",
    "ReportService",
]
