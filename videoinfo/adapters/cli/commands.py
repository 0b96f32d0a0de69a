"""Commandes CLI describe et probe : rapport d'informations sur une video."""

from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from videoinfo.adapters.cli.helpers import emit_outcome
from videoinfo.container import Container
from videoinfo.core.ports.input_source import InputExhaustedError


def describe() -> None:
    """Saisit les informations d'une video et affiche le rapport."""
    container = Container()
    collector = container.field_collector()
    report_service = container.report_service()

    typer.echo("Enter video information:")
    try:
        fields = collector.collect_video_fields()
    except InputExhaustedError as e:
        logger.info("Saisie interrompue", reason=str(e))
        outcome = report_service.failure(str(e))
    else:
        outcome = report_service.build(fields)

    emit_outcome(outcome)


def probe(
    path: Annotated[
        Path,
        typer.Argument(help="Fichier video a analyser avec mediainfo"),
    ],
) -> None:
    """Lit les informations d'un fichier video existant et affiche le rapport."""
    container = Container()
    extractor = container.media_info_extractor()
    report_service = container.report_service()

    fields = extractor.extract(path)
    if fields is None:
        outcome = report_service.failure(f"Could not read video metadata from {path}")
    else:
        outcome = report_service.build(fields)

    emit_outcome(outcome)
