"""
Point d'entree CLI de videoinfo.

Configure le logging et fournit les commandes CLI. Sans sous-commande,
la saisie interactive (describe) est lancee.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import describe, probe
from .config import Settings
from .container import Container
from .logging_config import configure_logging, resolve_log_level

app = typer.Typer(
    name="videoinfo",
    help="Rapport d'informations sur un fichier video",
)
container = Container()


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """videoinfo - Informations techniques d'un fichier video."""
    settings = get_config()
    configure_logging(
        log_level=resolve_log_level(settings.log_level, verbose=verbose, quiet=quiet),
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )
    logger.debug("Demarrage de videoinfo", version=__version__)

    if ctx.invoked_subcommand is None:
        describe()


app.command()(describe)
app.command()(probe)


def get_config() -> Settings:
    """Recupere les parametres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    attempts = config.max_input_attempts or "illimite"
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file or 'aucun'}")
    typer.echo(f"Tentatives de saisie : {attempts}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"videoinfo v{__version__}")


def main() -> None:
    """Point d'entree de l'application."""
    app()


if __name__ == "__main__":
    main()
