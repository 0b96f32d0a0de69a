"""
Implementation de l'extracteur de champs video avec pymediainfo.

Ce module fournit MediaInfoExtractor qui implemente IMediaInfoExtractor
pour lire duree, dimensions, frequence d'images et codec d'un fichier video.
"""

from pathlib import Path
from typing import Optional

from loguru import logger
from pymediainfo import MediaInfo as PyMediaInfo

from videoinfo.core.ports.parser import IMediaInfoExtractor
from videoinfo.core.value_objects.media_info import VideoFields


class MediaInfoExtractor(IMediaInfoExtractor):
    """
    Extracteur de champs video utilisant pymediainfo.

    Le nom et l'extension viennent du chemin, la taille du systeme de
    fichiers, le reste des pistes General et Video.
    """

    # Mapping des formats mediainfo vers les noms de codec usuels
    VIDEO_CODEC_NAMES: dict[str, str] = {
        "avc": "H.264",
        "hevc": "H.265",
        "av1": "AV1",
        "vp8": "VP8",
        "vp9": "VP9",
        "mpeg-4 visual": "MPEG-4",
        "mpeg video": "MPEG-2",
        "prores": "ProRes",
    }

    def extract(self, file_path: Path) -> Optional[VideoFields]:
        """
        Extrait les champs video d'un fichier.

        Args:
            file_path: Chemin complet vers le fichier video

        Returns:
            VideoFields complets, ou None si le fichier est absent, illisible,
            sans piste video, ou si une valeur numerique manque.
        """
        if not file_path.is_file():
            logger.debug("Fichier introuvable", path=str(file_path))
            return None

        try:
            media_info = PyMediaInfo.parse(str(file_path))
        except (OSError, RuntimeError) as e:
            logger.warning("Lecture mediainfo impossible", path=str(file_path), error=str(e))
            return None

        video_tracks = [
            track for track in media_info.tracks if track.track_type == "Video"
        ]
        general_tracks = [
            track for track in media_info.tracks if track.track_type == "General"
        ]
        if not video_tracks or not general_tracks:
            logger.debug("Piste video ou generale absente", path=str(file_path))
            return None

        video = video_tracks[0]
        duration = self._extract_duration(general_tracks[0])
        width = self._to_int(video.width)
        height = self._to_int(video.height)
        frame_rate = self._to_float(video.frame_rate)
        size_bytes = float(file_path.stat().st_size)

        numeric = (duration, size_bytes, width, height, frame_rate)
        if any(value is None or value <= 0 for value in numeric):
            logger.debug(
                "Metadonnees incompletes",
                path=str(file_path),
                duration=duration,
                width=width,
                height=height,
                frame_rate=frame_rate,
            )
            return None

        return VideoFields(
            filename=file_path.stem,
            format=file_path.suffix,
            duration=duration,
            size_bytes=size_bytes,
            width=width,
            height=height,
            frame_rate=frame_rate,
            codec=self._normalize_video_codec(video.format),
        )

    def _extract_duration(self, general_track) -> Optional[float]:
        """
        Extrait la duree en SECONDES depuis la piste generale.

        pymediainfo retourne la duree en millisecondes.
        """
        duration_ms = self._to_float(general_track.duration)
        if duration_ms is None:
            return None
        return duration_ms / 1000

    def _normalize_video_codec(self, codec: Optional[str]) -> str:
        """
        Normalise le nom du codec video.

        Args:
            codec: Format brut depuis mediainfo (ex: "AVC", "HEVC")

        Returns:
            Nom usuel (H.264, H.265...), le format original si inconnu,
            ou une chaine vide si absent.
        """
        if not codec:
            return ""
        return self.VIDEO_CODEC_NAMES.get(codec.lower(), codec)

    @staticmethod
    def _to_float(value) -> Optional[float]:
        if value is None:
            return None
        try:
            return float(value)
        except (TypeError, ValueError):
            return None

    @staticmethod
    def _to_int(value) -> Optional[int]:
        number = MediaInfoExtractor._to_float(value)
        if number is None:
            return None
        return int(number)
