"""
Ports (interfaces abstraites) du domaine.

Exports :
- IInputSource : Source de lignes de texte repondant a une invite
- IMediaInfoExtractor : Extraction des champs video depuis un fichier
- InputExhaustedError : La source ne peut plus fournir de reponse
"""

from videoinfo.core.ports.input_source import IInputSource, InputExhaustedError
from videoinfo.core.ports.parser import IMediaInfoExtractor

__all__ = [
    "IInputSource",
    "IMediaInfoExtractor",
    "InputExhaustedError",
]
