"""
Couche domaine (core).

Contient les entites metier, ports (interfaces abstraites), et objets valeur.
Cette couche n'a AUCUNE dependance vers les adaptateurs (CLI, mediainfo).

Sous-packages :
- entities/ : Entites metier (MediaFile, VideoFile)
- ports/ : Interfaces abstraites definissant les contrats pour les adaptateurs
- value_objects/ : Objets valeur immutables (Resolution, VideoFields, Ok/Err)
"""
