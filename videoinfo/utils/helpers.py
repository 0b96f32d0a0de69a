"""
Fonctions utilitaires partagees dans le projet videoinfo.

Ce module centralise les fonctions pures de formatage :
- is_valid_format : appartenance d'une extension a une liste autorisee
- format_size : taille en octets vers texte lisible (KB, MB, GB)
- format_duration : duree en secondes vers H:MM:SS
"""

from collections.abc import Iterable

from videoinfo.utils.constants import BYTES_PER_GB, BYTES_PER_KB, BYTES_PER_MB


def is_valid_format(format: str, valid_formats: Iterable[str]) -> bool:
    """
    Verifie qu'une extension appartient a la liste des formats acceptes.

    La comparaison est exacte : sensible a la casse, point initial inclus
    (".MP4" n'est pas ".mp4").
    """
    return format in tuple(valid_formats)


def format_size(size_bytes: float) -> str:
    """
    Formate une taille en octets en format lisible (unites binaires).

    Args:
        size_bytes: Taille en octets (>= 0)

    Returns:
        La valeur dans la plus grande unite ou elle vaut au moins 1,
        avec deux decimales (ex: "1.50 KB", "10.00 MB", "512 bytes").
    """
    if size_bytes >= BYTES_PER_GB:
        return f"{size_bytes / BYTES_PER_GB:.2f} GB"
    elif size_bytes >= BYTES_PER_MB:
        return f"{size_bytes / BYTES_PER_MB:.2f} MB"
    elif size_bytes >= BYTES_PER_KB:
        return f"{size_bytes / BYTES_PER_KB:.2f} KB"
    return f"{size_bytes:g} bytes"


def format_duration(seconds: float) -> str:
    """Formate une duree en secondes en H:MM:SS (secondes fractionnaires tronquees)."""
    total = int(seconds)
    hours = total // 3600
    minutes = (total % 3600) // 60
    secs = total % 60
    return f"{hours}:{minutes:02d}:{secs:02d}"
