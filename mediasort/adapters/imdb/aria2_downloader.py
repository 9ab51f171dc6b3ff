"""
Telechargement des datasets via aria2c.

aria2c est lance une seule fois pour toutes les URLs (mode fichier d'entree),
avec plusieurs connexions par fichier et reprise des transferts partiels.
"""

import asyncio
from pathlib import Path

from loguru import logger

from mediasort.core.errors import ExternalToolError
from mediasort.core.ports.tools import IDownloader
from mediasort.utils.constants import ARIA2C_MAX_CONNECTIONS

# Nom du fichier manifeste ecrit dans le repertoire de destination
MANIFEST_NAME = ".mediasort-aria2.txt"


class Aria2Downloader(IDownloader):
    """
    Telechargeur multi-connexions base sur aria2c.

    Options utilisees:
    - -j N : N telechargements en parallele
    - -x N : N connexions maximum par serveur
    - -s N : N segments par fichier
    - -c : reprise des telechargements partiels
    - -i manifest : liste des URLs
    """

    def __init__(
        self,
        executable: str = "aria2c",
        connections: int = ARIA2C_MAX_CONNECTIONS,
    ) -> None:
        self._executable = executable
        self._connections = connections

    @property
    def name(self) -> str:
        return "aria2c"

    def build_command(self, manifest: Path, destination: Path) -> list[str]:
        """Construit la ligne de commande aria2c."""
        n = str(self._connections)
        return [
            self._executable,
            "-j", n,
            "-x", n,
            "-s", n,
            "-c",
            "-d", str(destination),
            "-i", str(manifest),
        ]

    async def download(self, urls: list[str], destination: Path) -> list[Path]:
        """
        Telecharge toutes les URLs en une invocation d'aria2c.

        Raises:
            ExternalToolError: Si aria2c est introuvable ou se termine en erreur
        """
        destination.mkdir(parents=True, exist_ok=True)
        manifest = destination / MANIFEST_NAME
        manifest.write_text("".join(f"{url}\n" for url in urls), encoding="utf-8")

        cmd = self.build_command(manifest, destination)
        logger.debug(f"Execution: {' '.join(cmd)}")

        try:
            try:
                process = await asyncio.create_subprocess_exec(
                    *cmd,
                    stdout=asyncio.subprocess.DEVNULL,
                    stderr=asyncio.subprocess.PIPE,
                )
            except FileNotFoundError as e:
                raise ExternalToolError(self.name, detail=str(e)) from e

            _, stderr = await process.communicate()
        finally:
            manifest.unlink(missing_ok=True)

        if process.returncode != 0:
            raise ExternalToolError(
                self.name,
                process.returncode,
                stderr.decode(errors="replace").strip(),
            )

        return [destination / url.rsplit("/", 1)[-1] for url in urls]
