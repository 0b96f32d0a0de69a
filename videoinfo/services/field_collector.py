"""
Collecte des champs d'un fichier video depuis une source d'entree.

Chaque champ suit une petite machine a etats :

    AWAITING_INPUT --(saisie valide)--> ACCEPTED
    AWAITING_INPUT --(saisie invalide)--> INVALID_RETRY
    INVALID_RETRY --(saisie invalide)--> INVALID_RETRY
    INVALID_RETRY --(saisie valide)--> ACCEPTED

Une saisie est valide si le parseur du champ l'accepte et si la valeur
satisfait son predicat. Les champs texte acceptent toute ligne.
"""

import math
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from loguru import logger

from videoinfo.core.ports.input_source import IInputSource, InputExhaustedError
from videoinfo.core.value_objects.media_info import VideoFields

T = TypeVar("T")


class FieldState(Enum):
    """Etat de la saisie d'un champ."""

    AWAITING_INPUT = "awaiting_input"
    INVALID_RETRY = "invalid_retry"
    ACCEPTED = "accepted"


def _accept_any(value: Any) -> bool:
    return True


def is_positive(value: float) -> bool:
    return value > 0


def parse_text(raw: str) -> str:
    return raw


def parse_float(raw: str) -> float:
    """Parse un nombre decimal fini. Leve ValueError sinon (y compris nan, inf)."""
    value = float(raw.strip())
    if not math.isfinite(value):
        raise ValueError(f"non-finite value: {raw!r}")
    return value


def parse_int(raw: str) -> int:
    """Parse un entier. "12.5" est refuse."""
    return int(raw.strip())


@dataclass(frozen=True)
class FieldSpec(Generic[T]):
    """
    Description d'un champ a collecter.

    Attributs:
        key: Nom de l'attribut correspondant dans VideoFields
        label: Nom affiche dans le message de nouvelle tentative
        prompt: Invite initiale
        parse: Conversion du texte saisi (leve ValueError si invalide)
        predicate: Contrainte sur la valeur convertie
    """

    key: str
    label: str
    prompt: str
    parse: Callable[[str], T]
    predicate: Callable[[T], bool] = _accept_any

    @property
    def retry_prompt(self) -> str:
        return f"Please enter a valid {self.label}: "

    def accept(self, raw: str) -> tuple[FieldState, Optional[T]]:
        """Transition depuis une saisie brute : ACCEPTED avec la valeur, ou INVALID_RETRY."""
        try:
            value = self.parse(raw)
        except ValueError:
            return FieldState.INVALID_RETRY, None
        if not self.predicate(value):
            return FieldState.INVALID_RETRY, None
        return FieldState.ACCEPTED, value


# Ordre des invites de la console
VIDEO_FIELD_SPECS: tuple[FieldSpec, ...] = (
    FieldSpec("filename", "filename", "Filename (without extension): ", parse_text),
    FieldSpec("format", "format", "Format (e.g., .mp4, .mkv): ", parse_text),
    FieldSpec("duration", "duration", "Duration (in seconds): ", parse_float, is_positive),
    FieldSpec("size_bytes", "size", "Size (in bytes): ", parse_float, is_positive),
    FieldSpec("width", "width", "Width (pixels): ", parse_int, is_positive),
    FieldSpec("height", "height", "Height (pixels): ", parse_int, is_positive),
    FieldSpec("frame_rate", "frame rate", "Frame Rate (fps): ", parse_float, is_positive),
    FieldSpec("codec", "codec", "Video Codec (e.g., H.264, H.265): ", parse_text),
)


class FieldCollector:
    """
    Collecte les champs video en interrogeant une source d'entree.

    Les nouvelles tentatives sont illimitees sauf si max_attempts est fourni.

    Attributs:
        source: Source des reponses (console, reponses scriptees...)
        max_attempts: Nombre maximal de saisies par champ (None = illimite)
    """

    def __init__(self, source: IInputSource, max_attempts: Optional[int] = None) -> None:
        self._source = source
        self._max_attempts = max_attempts

    def collect_field(self, spec: FieldSpec[T]) -> T:
        """
        Interroge la source jusqu'a obtenir une valeur acceptee.

        Raises:
            InputExhaustedError: si la source est epuisee ou si la limite
                de tentatives est atteinte.
        """
        state = FieldState.AWAITING_INPUT
        attempts = 0
        while True:
            if self._max_attempts is not None and attempts >= self._max_attempts:
                raise InputExhaustedError(
                    f"No valid {spec.label} after {attempts} attempts"
                )
            prompt = spec.prompt if state is FieldState.AWAITING_INPUT else spec.retry_prompt
            raw = self._source.read_line(prompt)
            attempts += 1

            state, value = spec.accept(raw)
            if state is FieldState.ACCEPTED:
                logger.debug("Champ accepte", field=spec.key, attempts=attempts)
                return value
            logger.debug("Saisie rejetee", field=spec.key, raw=raw)

    def collect_video_fields(self) -> VideoFields:
        """Collecte tous les champs dans l'ordre des invites."""
        values = {spec.key: self.collect_field(spec) for spec in VIDEO_FIELD_SPECS}
        return VideoFields(**values)
