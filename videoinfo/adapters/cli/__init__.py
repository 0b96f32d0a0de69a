"""
Package CLI de videoinfo.

- console_input : source d'entree interactive (Rich Console)
- commands : commandes describe et probe
- helpers : affichage des issues de rapport
"""
