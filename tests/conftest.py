"""
Fixtures pytest partagees pour les tests MediaSort.

Ce module contient les fixtures communes utilisees dans les tests:
- Mocks des interfaces (IFileSystem, outils externes)
- Settings de test avec chemins temporaires
- Repertoire de datasets TSV de test
"""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from mediasort.config import Settings
from mediasort.core.ports.file_system import IFileSystem
from mediasort.core.ports.tools import IDecompressor, IDownloader, ILineSorter
from mediasort.services.media_signature import MKV_SIGNATURE


@pytest.fixture
def mock_file_system() -> MagicMock:
    """
    Mock de IFileSystem pour les tests.

    Par defaut le repertoire est vide et aucune cible n'existe.
    """
    mock = MagicMock(spec=IFileSystem)
    mock.list_entries.return_value = []
    mock.exists.return_value = False
    mock.is_symlink.return_value = False
    mock.is_dir.return_value = False
    mock.is_file.return_value = True
    mock.rename.return_value = None
    mock.replace.return_value = None
    mock.delete.return_value = None
    # Signature Matroska : les fichiers .mkv et .mp4 simules sont acceptes
    mock.read_header.return_value = MKV_SIGNATURE
    return mock


@pytest.fixture
def mock_downloader() -> MagicMock:
    """Mock de IDownloader dont download() renvoie les chemins attendus."""
    mock = MagicMock(spec=IDownloader)
    mock.name = "mock"

    async def default_download(urls: list[str], destination: Path) -> list[Path]:
        return [destination / url.rsplit("/", 1)[-1] for url in urls]

    mock.download = AsyncMock(side_effect=default_download)
    return mock


@pytest.fixture
def mock_decompressor() -> MagicMock:
    """Mock de IDecompressor qui retire le suffixe .gz."""
    mock = MagicMock(spec=IDecompressor)
    mock.decompress.side_effect = lambda archives: [a.with_suffix("") for a in archives]
    return mock


@pytest.fixture
def mock_line_sorter() -> MagicMock:
    """Mock de ILineSorter (aucune operation)."""
    mock = MagicMock(spec=ILineSorter)
    mock.sort_file.return_value = None
    return mock


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Ignore le fichier .env pour isoler les tests.
    """
    datasets_dir = tmp_path / "datasets"
    datasets_dir.mkdir()

    return Settings(
        _env_file=None,
        datasets_dir=datasets_dir,
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def unsorted_tsv(tmp_path: Path) -> Path:
    """Fichier TSV avec en-tete et lignes de donnees non triees."""
    file_path = tmp_path / "title.ratings.tsv"
    file_path.write_bytes(
        b"tconst\taverageRating\tnumVotes\n"
        b"tt0000003\t6.5\t1800\n"
        b"tt0000001\t5.7\t1941\n"
        b"Zz\t1.0\t1\n"
        b"tt0000002\t5.8\t260\n"
        b"aa\t2.0\t2\n"
        b"tt0000001\t5.7\t1941\n"
    )
    return file_path
