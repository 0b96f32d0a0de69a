"""
Fixtures pytest partagees pour les tests videoinfo.

Ce module contient les fixtures communes utilisees dans les tests:
- Source d'entree scriptee (implementation de IInputSource)
- Champs et reponses d'un fichier video de reference
- Reinitialisation des handlers loguru entre les tests
"""

from collections.abc import Iterable
from typing import Callable

import pytest
from loguru import logger

from videoinfo.core.ports.input_source import IInputSource, InputExhaustedError
from videoinfo.core.value_objects import VideoFields


class ScriptedInputSource(IInputSource):
    """Source d'entree rejouant une liste de reponses et memorisant les invites."""

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = list(answers)
        self.prompts: list[str] = []

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            raise InputExhaustedError("Input ended before all fields were provided")
        return self._answers.pop(0)


@pytest.fixture(autouse=True)
def reset_loguru() -> Iterable[None]:
    """Retire les handlers loguru ajoutes par un test (streams CliRunner fermes)."""
    yield
    logger.remove()


@pytest.fixture
def scripted_source() -> Callable[..., ScriptedInputSource]:
    """Fabrique de sources scriptees : scripted_source("clip", ".mp4", ...)."""

    def factory(*answers: str) -> ScriptedInputSource:
        return ScriptedInputSource(answers)

    return factory


@pytest.fixture
def clip_answers() -> list[str]:
    """Reponses console pour un clip 1080p de 10 MB et 125 secondes."""
    return ["clip", ".mp4", "125", "10485760", "1920", "1080", "30", "H.264"]


@pytest.fixture
def clip_fields() -> VideoFields:
    """Champs correspondant a clip_answers."""
    return VideoFields(
        filename="clip",
        format=".mp4",
        duration=125.0,
        size_bytes=10485760.0,
        width=1920,
        height=1080,
        frame_rate=30.0,
        codec="H.264",
    )
