"""
Interfaces ports pour les outils externes du pipeline de datasets.

Chaque etape du pipeline (telechargement, decompression, tri) est deleguee
a un outil externe. Les implementations levent ExternalToolError en cas d'echec.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class IDownloader(ABC):
    """Telecharge un lot d'URLs dans un repertoire."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Nom de l'outil (pour les logs)."""
        ...

    @abstractmethod
    async def download(self, urls: list[str], destination: Path) -> list[Path]:
        """
        Telecharge toutes les URLs dans le repertoire de destination.

        Args :
            urls : URLs a telecharger
            destination : Repertoire cible (cree si necessaire)

        Retourne :
            Chemins des fichiers telecharges

        Raises :
            ExternalToolError : Si le telechargement echoue
        """
        ...


class IDecompressor(ABC):
    """Decompresse un lot d'archives gzip sur place."""

    @abstractmethod
    def decompress(self, archives: list[Path]) -> list[Path]:
        """
        Decompresse les archives en une seule invocation.

        Retourne :
            Chemins des fichiers decompresses (suffixe .gz retire)

        Raises :
            ExternalToolError : Si la decompression echoue
        """
        ...


class ILineSorter(ABC):
    """Trie les lignes d'un fichier en conservant la premiere ligne."""

    @abstractmethod
    def sort_file(self, path: Path) -> None:
        """
        Trie les lignes 2..N du fichier, remplace le fichier atomiquement.

        Raises :
            ExternalToolError : Si le tri echoue (le fichier d'origine est intact)
        """
        ...
