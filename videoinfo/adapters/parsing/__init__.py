"""
Adaptateurs de parsing pour videoinfo.

Ce package contient les implementations concretes des interfaces de parsing:
- MediaInfoExtractor: Extrait les champs video avec pymediainfo
"""
