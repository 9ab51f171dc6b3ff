"""
MediaSort - Outils de preparation des datasets IMDb et de renommage de videos.

Ce package fournit les fonctionnalites pour telecharger, decompresser et trier
les datasets IMDb, et pour renommer les fichiers video selon une convention
normalisee.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (objets valeur, ports, erreurs)
- services/ : Couche application (cas d'utilisation, orchestration)
- adapters/ : Couche infrastructure (CLI, systeme de fichiers, outils externes)
"""

__version__ = "0.1.0"
