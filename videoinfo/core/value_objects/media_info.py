"""
Objets valeur pour les informations media.

Objets valeur immutables representant les informations techniques des fichiers video.
Tous les objets valeur utilisent @dataclass(frozen=True) pour garantir l'immutabilite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Resolution:
    """
    Resolution video (largeur x hauteur).

    Attributs :
        width : Resolution horizontale en pixels
        height : Resolution verticale en pixels

    Proprietes :
        label : Classe de resolution (4K, 1080p, 720p, SD)
    """

    width: int
    height: int

    @property
    def label(self) -> str:
        """
        Retourne la classe de resolution.

        Les deux dimensions doivent atteindre le seuil : la premiere regle
        satisfaite l'emporte.
        """
        if self.width >= 3840 and self.height >= 2160:
            return "4K"
        elif self.width >= 1920 and self.height >= 1080:
            return "1080p"
        elif self.width >= 1280 and self.height >= 720:
            return "720p"
        else:
            return "SD"

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


@dataclass(frozen=True)
class VideoFields:
    """
    Champs d'un fichier video tels que fournis par une source d'entree.

    Les contraintes de positivite (duree, taille, dimensions, fps) sont
    garanties par la source (collecteur console, extracteur mediainfo).
    Le format n'est verifie qu'a la construction du VideoFile.

    Attributs :
        filename : Nom du fichier sans extension
        format : Extension avec le point initial (ex: ".mp4")
        duration : Duree en secondes
        size_bytes : Taille en octets
        width : Largeur en pixels
        height : Hauteur en pixels
        frame_rate : Images par seconde
        codec : Codec video (texte libre)
    """

    filename: str
    format: str
    duration: float
    size_bytes: float
    width: int
    height: int
    frame_rate: float
    codec: str
