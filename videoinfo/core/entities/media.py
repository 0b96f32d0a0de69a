"""
Entite media abstraite.

Attributs partages par toutes les variantes de media, utilitaires de
formatage, et contrat de rapport que chaque variante implemente.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from videoinfo.utils.helpers import format_duration, format_size, is_valid_format


class MediaKind(Enum):
    """Variantes de media connues. Ensemble ferme : une valeur par sous-classe."""

    VIDEO = "video"


@dataclass(frozen=True)
class MediaFile(ABC):
    """
    Enregistrement media abstrait.

    La positivite de la duree et de la taille est garantie par l'appelant,
    pas par l'enregistrement.

    Attributs :
        filename : Nom du fichier sans extension
        duration : Duree en secondes
        size_bytes : Taille en octets
        format : Extension avec le point initial (ex: ".mp4")
    """

    filename: str
    duration: float
    size_bytes: float
    format: str

    is_valid_format = staticmethod(is_valid_format)
    format_size = staticmethod(format_size)

    @property
    @abstractmethod
    def kind(self) -> MediaKind:
        """Variante de media."""
        ...

    @property
    def full_name(self) -> str:
        """Nom de fichier suivi de son extension."""
        return f"{self.filename}{self.format}"

    @property
    def formatted_duration(self) -> str:
        return format_duration(self.duration)

    @property
    def formatted_size(self) -> str:
        return format_size(self.size_bytes)

    @abstractmethod
    def report_lines(self) -> list[str]:
        """
        Retourne les lignes du rapport d'information.

        L'ordre et les libelles des lignes sont fixes pour chaque variante.
        """
        ...

    def display_info(self, write: Callable[[str], None] = print) -> None:
        """Ecrit le rapport ligne par ligne sur la sortie fournie."""
        for line in self.report_lines():
            write(line)
