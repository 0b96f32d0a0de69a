"""
Interface port pour les sources d'entree ligne par ligne.

Le collecteur de champs ne connait que ce contrat : la console, une liste
de reponses scriptees ou toute autre source peuvent etre substituees.
"""

from abc import ABC, abstractmethod


class InputExhaustedError(Exception):
    """La source d'entree ne peut plus fournir de reponse (fin de flux, limite atteinte)."""


class IInputSource(ABC):
    """
    Interface pour une source de reponses textuelles.

    Chaque appel affiche (ou ignore) l'invite et retourne une ligne,
    sans le saut de ligne final.
    """

    @abstractmethod
    def read_line(self, prompt: str) -> str:
        """
        Lit une ligne en reponse a une invite.

        Args:
            prompt: Texte d'invite, affiche tel quel

        Retourne:
            La ligne saisie (eventuellement vide).

        Raises:
            InputExhaustedError: si la source est epuisee.
        """
        ...
