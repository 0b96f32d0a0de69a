"""
Adaptateurs : implementations concretes des ports du domaine.

- cli/ : Interface en ligne de commande (Typer, Rich)
- parsing/ : Extraction des metadonnees avec pymediainfo
"""
