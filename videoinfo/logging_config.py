"""
Configuration du logging de l'application via loguru.

Fournit un logging structure avec :
- Sortie console (stderr) : lisible par l'humain, coloree
- Sortie fichier optionnelle : serialisee en JSON, avec rotation

La sortie standard reste reservee au rapport.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

# Niveaux selectionnes par l'option --verbose (-v, -vv)
VERBOSITY_LEVELS = {1: "INFO", 2: "DEBUG"}


def resolve_log_level(default_level: str, verbose: int = 0, quiet: bool = False) -> str:
    """Determine le niveau console a partir des options CLI et de la configuration."""
    if quiet:
        return "ERROR"
    if verbose:
        return VERBOSITY_LEVELS.get(verbose, "DEBUG")
    return default_level


def configure_logging(
    log_level: str = "WARNING",
    log_file: Optional[Path] = None,
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau de log minimum pour la sortie console (DEBUG, INFO, WARNING, ERROR)
        log_file : Chemin vers le fichier de log (aucun fichier si None)
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB", "1 GB")
        retention_count : Nombre de fichiers rotatifs a conserver
    """
    # Supprime le handler par defaut
    logger.remove()

    # Handler console - lisible par l'humain
    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    if log_file is None:
        return

    # Handler fichier - JSON pour l'analyse
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,  # Sortie JSON
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
    )

    logger.debug("Logging configure", log_file=str(log_file), rotation=rotation_size)
