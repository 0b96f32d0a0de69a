"""
Utilitaires partages pour les commandes CLI de videoinfo.

Ce module fournit :
- emit_outcome : ecrit le rapport sur stdout ou l'erreur sur stderr, puis
  termine avec le code de sortie approprie
"""

import typer

from videoinfo.services.report import ReportOutcome


def emit_outcome(outcome: ReportOutcome) -> None:
    """
    Affiche l'issue d'une demande de rapport.

    Raises:
        typer.Exit: en cas d'echec, avec le code de sortie de l'issue.
    """
    if not outcome.succeeded:
        typer.echo(f"Error: {outcome.error}", err=True)
        raise typer.Exit(outcome.exit_code)

    outcome.media.display_info(typer.echo)
