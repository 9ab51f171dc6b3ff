"""
Objet valeur pour les fichiers de dataset IMDb.

Les datasets sont distribues sous forme de fichiers TSV compresses (.tsv.gz).
Apres decompression, le fichier .tsv conserve le meme nom sans le suffixe .gz.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DatasetFile:
    """
    Fichier de dataset IMDb identifie par son nom.

    Attributs:
        name: Nom du dataset sans extension (ex: "title.ratings")
    """

    name: str

    @property
    def archive_name(self) -> str:
        """Nom de l'archive telechargee (ex: title.ratings.tsv.gz)."""
        return f"{self.name}.tsv.gz"

    @property
    def tsv_name(self) -> str:
        """Nom du fichier decompresse (ex: title.ratings.tsv)."""
        return f"{self.name}.tsv"

    def url(self, base_url: str) -> str:
        """Construit l'URL de telechargement a partir de l'URL de base."""
        return f"{base_url.rstrip('/')}/{self.archive_name}"

    def archive_path(self, directory: Path) -> Path:
        return directory / self.archive_name

    def tsv_path(self, directory: Path) -> Path:
        return directory / self.tsv_name
