"""
Interfaces ports pour le systeme de fichiers.

Interface abstraite (port) definissant le contrat des operations fichiers
utilisees par le renommage des medias.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class IFileSystem(ABC):
    """
    Interface pour les operations de base sur les fichiers.

    Definit les operations pour parcourir un repertoire, inspecter
    ses entrees, lire leur signature, renommer et remplacer des fichiers.
    """

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Verifie si un chemin existe."""
        ...

    @abstractmethod
    def list_entries(self, directory: Path) -> list[Path]:
        """
        Liste les entrees directes d'un repertoire.

        Args :
            directory : Repertoire a parcourir

        Retourne :
            Chemins des entrees, tries par nom
        """
        ...

    @abstractmethod
    def is_file(self, path: Path) -> bool:
        """Verifie si un chemin est un fichier regulier."""
        ...

    @abstractmethod
    def is_dir(self, path: Path) -> bool:
        """Verifie si un chemin est un repertoire."""
        ...

    @abstractmethod
    def is_symlink(self, path: Path) -> bool:
        """Verifie si un chemin est un lien symbolique."""
        ...

    @abstractmethod
    def rename(self, source: Path, destination: Path) -> None:
        """
        Renomme un fichier dans le meme repertoire.

        Args :
            source : Chemin actuel du fichier
            destination : Nouveau chemin

        Raises :
            OSError : Si le renommage echoue
        """
        ...

    @abstractmethod
    def replace(self, source: Path, destination: Path) -> None:
        """
        Remplace destination par source, en ecrasant la cible si elle existe.

        Args :
            source : Fichier a deplacer
            destination : Chemin final

        Raises :
            OSError : Si le remplacement echoue
        """
        ...

    @abstractmethod
    def delete(self, path: Path) -> None:
        """Supprime un fichier. Un chemin absent n'est pas une erreur."""
        ...

    @abstractmethod
    def read_header(self, path: Path, size: int) -> bytes:
        """
        Lit les premiers octets d'un fichier.

        Args :
            path : Fichier a lire
            size : Nombre maximal d'octets a lire

        Retourne :
            Les octets lus (moins de size si le fichier est plus court)

        Raises :
            OSError : Si le fichier est illisible
        """
        ...
