"""
Interface port pour l'extraction de metadonnees techniques.

L'extracteur est une source d'entree alternative : il produit directement
les VideoFields depuis un fichier existant.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from videoinfo.core.value_objects.media_info import VideoFields


class IMediaInfoExtractor(ABC):
    """
    Interface pour l'extraction des champs video d'un fichier.

    Definit le contrat pour extraire duree, taille, dimensions,
    frequence d'images et codec via mediainfo.
    """

    @abstractmethod
    def extract(self, file_path: Path) -> Optional[VideoFields]:
        """
        Extrait les champs video d'un fichier.

        Args:
            file_path: Chemin complet vers le fichier video

        Retourne:
            VideoFields dont toutes les valeurs numeriques sont strictement
            positives, ou None si l'extraction echoue ou est incomplete.
        """
        ...
