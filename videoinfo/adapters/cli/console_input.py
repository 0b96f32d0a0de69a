"""
Source d'entree interactive basee sur la console Rich.
"""

from rich.console import Console

from videoinfo.core.ports.input_source import IInputSource, InputExhaustedError


class ConsoleInputSource(IInputSource):
    """
    Lit les reponses sur l'entree standard.

    L'invite est affichee telle quelle (sans balisage Rich), la reponse est
    lue jusqu'a la fin de ligne.
    """

    def __init__(self, console: Console) -> None:
        self._console = console

    def read_line(self, prompt: str) -> str:
        try:
            return self._console.input(prompt, markup=False, emoji=False)
        except EOFError as e:
            raise InputExhaustedError("Input ended before all fields were provided") from e
