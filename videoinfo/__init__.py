"""videoinfo - Rapport d'informations sur un fichier video."""

__version__ = "0.1.0"
