"""
Entite fichier video.

VideoFile etend MediaFile avec les attributs propres a la video, verifie son
format a la construction, et derive debit et classe de resolution.
"""

from dataclasses import dataclass
from typing import ClassVar

from videoinfo.core.entities.media import MediaFile, MediaKind
from videoinfo.core.value_objects import Err, Ok, Resolution, Result, VideoFields
from videoinfo.utils.constants import SUPPORTED_VIDEO_FORMATS


class UnsupportedFormatError(ValueError):
    """Format de fichier absent de la liste des formats video acceptes."""

    def __init__(self, format: str, supported: tuple[str, ...] = SUPPORTED_VIDEO_FORMATS) -> None:
        self.format = format
        self.supported = supported
        names = ", ".join(fmt.lstrip(".") for fmt in supported)
        super().__init__(f"Unsupported video format. Supported formats: {names}")


@dataclass(frozen=True)
class VideoFile(MediaFile):
    """
    Represente un fichier video avec ses metadonnees techniques.

    Attributs :
        width : Largeur en pixels
        height : Hauteur en pixels
        frame_rate : Images par seconde
        codec : Codec video (texte libre, non verifie)

    Raises:
        UnsupportedFormatError: si format n'est pas dans SUPPORTED_FORMATS
    """

    width: int
    height: int
    frame_rate: float
    codec: str

    SUPPORTED_FORMATS: ClassVar[tuple[str, ...]] = SUPPORTED_VIDEO_FORMATS

    def __post_init__(self) -> None:
        self.validate_format()

    @classmethod
    def create(cls, fields: VideoFields) -> Result["VideoFile", UnsupportedFormatError]:
        """
        Construit un VideoFile sans lever d'exception.

        Args:
            fields: Champs collectes par une source d'entree

        Returns:
            Ok(VideoFile) ou Err(UnsupportedFormatError)
        """
        try:
            video = cls(
                filename=fields.filename,
                duration=fields.duration,
                size_bytes=fields.size_bytes,
                format=fields.format,
                width=fields.width,
                height=fields.height,
                frame_rate=fields.frame_rate,
                codec=fields.codec,
            )
        except UnsupportedFormatError as e:
            return Err(e)
        return Ok(video)

    @property
    def kind(self) -> MediaKind:
        return MediaKind.VIDEO

    def validate_format(self) -> None:
        if not self.is_valid_format(self.format, self.SUPPORTED_FORMATS):
            raise UnsupportedFormatError(self.format, self.SUPPORTED_FORMATS)

    @property
    def resolution(self) -> Resolution:
        return Resolution(width=self.width, height=self.height)

    def calculate_bitrate(self) -> float:
        """
        Debit moyen en Mbps : (octets * 8) / (secondes * 1 000 000).

        Suppose duration > 0 ; l'appelant en est responsable.
        """
        return (self.size_bytes * 8) / (self.duration * 1_000_000)

    def report_lines(self) -> list[str]:
        resolution = self.resolution
        return [
            "",
            "=== Video Information ===",
            f"Filename: {self.full_name}",
            f"Duration: {self.formatted_duration}",
            f"Size: {self.formatted_size}",
            f"Resolution: {resolution} ({resolution.label})",
            f"Frame Rate: {self.frame_rate:g} fps",
            f"Video Codec: {self.codec}",
            f"Bitrate: {self.calculate_bitrate():.2f} Mbps",
            "=====================",
        ]
