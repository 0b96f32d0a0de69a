"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI.
"""

from dependency_injector import containers, providers
from rich.console import Console

from .adapters.cli.console_input import ConsoleInputSource
from .adapters.parsing.mediainfo_extractor import MediaInfoExtractor
from .config import Settings
from .services.field_collector import FieldCollector
from .services.report import ReportService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        collector = container.field_collector()
        fields = collector.collect_video_fields()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Console Rich partagee pour les invites
    console = providers.Singleton(Console, highlight=False)

    # Adapters - implementations concretes des ports
    input_source = providers.Factory(ConsoleInputSource, console=console)
    media_info_extractor = providers.Singleton(MediaInfoExtractor)

    # Services
    field_collector = providers.Factory(
        FieldCollector,
        source=input_source,
        max_attempts=config.provided.max_input_attempts,
    )
    report_service = providers.Singleton(ReportService)
