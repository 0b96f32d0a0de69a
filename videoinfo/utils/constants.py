"""
Constantes globales pour videoinfo.

Ce module contient les constantes utilisees dans l'application:
- Extensions video acceptees a la construction d'un VideoFile
- Unites binaires pour l'affichage des tailles
"""

# Extensions video acceptees (comparaison exacte, sensible a la casse)
SUPPORTED_VIDEO_FORMATS = (".mp4", ".mkv", ".avi", ".mov")

# Unites binaires (base 1024)
BYTES_PER_KB = 1024
BYTES_PER_MB = BYTES_PER_KB * 1024
BYTES_PER_GB = BYTES_PER_MB * 1024
