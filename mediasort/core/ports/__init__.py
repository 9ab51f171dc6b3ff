"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Les ports sont les frontieres de l'architecture hexagonale. Ils definissent
ce dont le domaine a besoin du monde exterieur sans specifier
comment ces besoins sont satisfaits.

Ports systeme de fichiers :
- IFileSystem : Listing de repertoires et renommage

Ports outils externes :
- IDownloader : Telechargement d'un lot d'URLs
- IDecompressor : Decompression d'un lot d'archives
- ILineSorter : Tri des lignes d'un fichier en conservant l'en-tete
"""

from mediasort.core.ports.file_system import IFileSystem
from mediasort.core.ports.tools import IDecompressor, IDownloader, ILineSorter

__all__ = [
    # Systeme de fichiers
    "IFileSystem",
    # Outils externes
    "IDownloader",
    "IDecompressor",
    "ILineSorter",
]
