"""
Adaptateur pour les operations sur le systeme de fichiers.

Implementation concrete de IFileSystem pour les operations fichiers reelles.
"""

import os
from pathlib import Path

from mediasort.core.ports.file_system import IFileSystem


class FileSystemAdapter(IFileSystem):
    """
    Implementation de IFileSystem pour le systeme de fichiers reel.

    Les erreurs de renommage ne sont pas interceptees : elles remontent
    au service appelant qui decide de la politique a appliquer.
    """

    def exists(self, path: Path) -> bool:
        """Verifie si un chemin existe (lien symbolique casse inclus)."""
        return path.exists() or path.is_symlink()

    def list_entries(self, directory: Path) -> list[Path]:
        """Liste les entrees directes d'un repertoire, triees par nom."""
        return sorted(directory.iterdir(), key=lambda p: p.name)

    def is_file(self, path: Path) -> bool:
        return path.is_file()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def is_symlink(self, path: Path) -> bool:
        return path.is_symlink()

    def rename(self, source: Path, destination: Path) -> None:
        """
        Renomme un fichier.

        Utilise os.rename (atomique sur le meme filesystem).
        """
        os.rename(source, destination)

    def replace(self, source: Path, destination: Path) -> None:
        """
        Remplace destination par source.

        Utilise os.replace (atomique sur le meme filesystem, ecrase la cible).
        """
        os.replace(source, destination)

    def delete(self, path: Path) -> None:
        path.unlink(missing_ok=True)

    def read_header(self, path: Path, size: int) -> bytes:
        with open(path, "rb") as f:
            return f.read(size)
