"""
Decompression des archives via pigz.

Une seule invocation de `pigz -d -f` couvre toutes les archives. pigz
remplace chaque fichier .gz par sa version decompressee ; -f autorise
l'ecrasement d'un fichier .tsv laisse par une execution precedente.
"""

import subprocess
from pathlib import Path

from loguru import logger

from mediasort.core.errors import ExternalToolError
from mediasort.core.ports.tools import IDecompressor


class PigzDecompressor(IDecompressor):
    """Decompresseur gzip parallele base sur pigz."""

    def __init__(self, executable: str = "pigz") -> None:
        self._executable = executable

    def build_command(self, archives: list[Path]) -> list[str]:
        return [self._executable, "-d", "-f", *(str(a) for a in archives)]

    def decompress(self, archives: list[Path]) -> list[Path]:
        if not archives:
            return []

        cmd = self.build_command(archives)
        logger.debug(f"Execution: {' '.join(cmd)}")

        try:
            result = subprocess.run(cmd, stdout=subprocess.DEVNULL, stderr=subprocess.PIPE)
        except FileNotFoundError as e:
            raise ExternalToolError("pigz", detail=str(e)) from e

        if result.returncode != 0:
            raise ExternalToolError(
                "pigz",
                result.returncode,
                result.stderr.decode(errors="replace").strip(),
            )

        return [archive.with_suffix("") for archive in archives]
