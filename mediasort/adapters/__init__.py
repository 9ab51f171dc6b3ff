"""
Couche infrastructure (adaptateurs).

Implementations concretes des ports du domaine :
- file_system : acces au systeme de fichiers reel
- imdb/ : outils externes du pipeline de datasets (aria2c, httpx, pigz, sort)
- cli/ : interface en ligne de commande (Typer + Rich)
"""
