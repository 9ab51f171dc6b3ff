"""
Telechargement des datasets via httpx.

Alternative a aria2c quand l'outil n'est pas installe : chaque fichier est
telecharge en streaming (une connexion par fichier, sans reprise).
"""

from pathlib import Path

import httpx
from loguru import logger

from mediasort.core.errors import ExternalToolError
from mediasort.core.ports.tools import IDownloader


class HttpDatasetDownloader(IDownloader):
    """Telechargeur en streaming base sur httpx.AsyncClient."""

    def __init__(self, timeout: float = 60.0) -> None:
        self._timeout = timeout

    @property
    def name(self) -> str:
        return "httpx"

    async def download(self, urls: list[str], destination: Path) -> list[Path]:
        """
        Telecharge les URLs une par une.

        Raises:
            ExternalToolError: Si une requete echoue (statut HTTP ou reseau)
        """
        destination.mkdir(parents=True, exist_ok=True)
        downloaded: list[Path] = []

        async with httpx.AsyncClient(timeout=self._timeout, follow_redirects=True) as client:
            for url in urls:
                file_path = destination / url.rsplit("/", 1)[-1]
                logger.debug(f"Telechargement {url} -> {file_path}")
                try:
                    async with client.stream("GET", url) as response:
                        response.raise_for_status()

                        # Telecharger en streaming pour gerer les gros fichiers
                        with open(file_path, "wb") as f:
                            async for chunk in response.aiter_bytes():
                                f.write(chunk)
                except httpx.HTTPError as e:
                    raise ExternalToolError(self.name, detail=f"{url}: {e}") from e
                downloaded.append(file_path)

        return downloaded
