"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- Resolution : Resolution video (largeur x hauteur) et sa classe (4K, 1080p...)
- VideoFields : Champs bruts d'un fichier video, valides par la source d'entree
- Ok / Err / Result : Resultat d'une construction (succes ou erreur typee)
"""

from videoinfo.core.value_objects.media_info import Resolution, VideoFields
from videoinfo.core.value_objects.result import Err, Ok, Result

__all__ = [
    "Resolution",
    "VideoFields",
    "Ok",
    "Err",
    "Result",
]
