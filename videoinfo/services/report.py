"""
Service de rapport.

Construit le VideoFile a partir des champs collectes et convertit le
resultat en issue affichable : fichier media pret a afficher ou message
d'erreur, avec le code de sortie correspondant.
"""

from dataclasses import dataclass
from typing import Optional

from loguru import logger

from videoinfo.core.entities.media import MediaFile
from videoinfo.core.entities.video import VideoFile
from videoinfo.core.value_objects import Err, VideoFields

EXIT_OK = 0
EXIT_ERROR = 1


@dataclass(frozen=True)
class ReportOutcome:
    """
    Issue d'une demande de rapport.

    Attributs:
        exit_code: Code de sortie du processus (0 succes, 1 erreur)
        media: Fichier media construit (None en cas d'erreur)
        error: Message d'erreur, sans le prefixe "Error: "
    """

    exit_code: int
    media: Optional[MediaFile] = None
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.exit_code == EXIT_OK


class ReportService:
    """Construit les fichiers video et produit leurs rapports."""

    def build(self, fields: VideoFields) -> ReportOutcome:
        """
        Construit un VideoFile a partir des champs collectes.

        Args:
            fields: Champs fournis par une source d'entree

        Returns:
            ReportOutcome portant le VideoFile, ou l'erreur de construction
            et EXIT_ERROR.
        """
        result = VideoFile.create(fields)
        if isinstance(result, Err):
            logger.info("Construction refusee", format=fields.format, reason=str(result.error))
            return ReportOutcome(exit_code=EXIT_ERROR, error=str(result.error))

        video = result.value
        logger.debug(
            "Fichier video construit",
            kind=video.kind.value,
            resolution=video.resolution.label,
        )
        return ReportOutcome(exit_code=EXIT_OK, media=video)

    @staticmethod
    def failure(message: str) -> ReportOutcome:
        """Issue d'echec pour une erreur survenue avant la construction."""
        return ReportOutcome(exit_code=EXIT_ERROR, error=message)
