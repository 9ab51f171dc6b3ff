"""
Hierarchie des erreurs de MediaSort.

- MediaSortError : base commune
- ExternalToolError : echec d'un outil externe (aria2c, pigz, sort, HTTP)
- RenameError : echec d'un renommage, fatal pour le scan en cours
- ScanError : repertoire illisible pendant le scan, fatal egalement
"""

from pathlib import Path
from typing import Optional


class MediaSortError(Exception):
    """Erreur de base de MediaSort."""


class ExternalToolError(MediaSortError):
    """
    Echec d'un outil externe.

    Attributs:
        tool: Nom de l'outil (ex: "aria2c", "pigz", "sort")
        returncode: Code de sortie du processus, None si non lance
        detail: Message complementaire (stderr, exception d'origine)
    """

    def __init__(
        self,
        tool: str,
        returncode: Optional[int] = None,
        detail: str = "",
    ) -> None:
        self.tool = tool
        self.returncode = returncode
        self.detail = detail
        message = f"{tool} a echoue"
        if returncode is not None:
            message += f" (code {returncode})"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class RenameError(MediaSortError):
    """Echec du renommage d'un fichier."""

    def __init__(self, source: Path, target: Path, cause: OSError) -> None:
        self.source = source
        self.target = target
        self.cause = cause
        super().__init__(f"Impossible de renommer {source} -> {target}: {cause}")


class ScanError(MediaSortError):
    """Echec du listage d'un repertoire pendant le scan de renommage."""

    def __init__(self, directory: Path, cause: OSError) -> None:
        self.directory = directory
        self.cause = cause
        super().__init__(f"Impossible de lister {directory}: {cause}")
