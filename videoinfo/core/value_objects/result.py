"""
Type resultat pour les constructions pouvant echouer.

Un Result est soit Ok(value), soit Err(error). L'appelant teste la variante
avec isinstance et decide lui-meme du traitement de l'erreur (message, code
de sortie).
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Construction reussie."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err(Generic[E]):
    """Construction echouee, avec l'erreur typee."""

    error: E

    @property
    def is_ok(self) -> bool:
        return False


Result = Union[Ok[T], Err[E]]
