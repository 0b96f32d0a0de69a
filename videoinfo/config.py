"""
Configuration de l'application via pydantic-settings.

La configuration est chargee depuis les variables d'environnement avec le prefixe VIDEOINFO_,
et peut optionnellement etre fournie via un fichier .env.

Aucun parametre n'est obligatoire : les valeurs par defaut reproduisent le
protocole console sans fichier de log.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env a la racine du projet (parent de videoinfo/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Parametres de l'application avec support des variables d'environnement.

    Tous les parametres peuvent etre surcharges via des variables d'environnement
    avec le prefixe VIDEOINFO_.
    Exemple : VIDEOINFO_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="VIDEOINFO_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Logging (stderr uniquement, fichier JSON si log_file est defini)
    log_level: str = Field(default="WARNING")
    log_file: Optional[Path] = Field(default=None)
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5, ge=1)

    # Saisie : nombre maximal de tentatives par champ (None = illimite)
    max_input_attempts: Optional[int] = Field(default=None, ge=1)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: Optional[str | Path]) -> Optional[Path]:
        """Etend ~ vers le repertoire home dans les chemins."""
        if v is None or v == "":
            return None
        return Path(v).expanduser()

    @field_validator("log_level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        return v.upper()
