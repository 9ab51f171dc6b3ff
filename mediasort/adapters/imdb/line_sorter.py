"""
Tri des lignes d'un fichier TSV en conservant l'en-tete.

Le tri est delegue a l'utilitaire externe `sort` (tri fusion sur disque),
ce qui permet de traiter des fichiers plus gros que la memoire disponible.
La locale est forcee a C : l'ordre obtenu est l'ordre lexicographique
des octets, independant de l'environnement.

Deroulement pour un fichier F:
1. La premiere ligne de F est copiee telle quelle dans F.sorted
2. Les lignes 2..N sont envoyees sur l'entree standard de sort,
   dont la sortie est ajoutee a F.sorted
3. F.sorted remplace F via IFileSystem.replace (os.replace, atomique
   sur le meme filesystem)
"""

import os
import subprocess
from pathlib import Path
from typing import Optional

from loguru import logger

from mediasort.adapters.file_system import FileSystemAdapter
from mediasort.core.errors import ExternalToolError
from mediasort.core.ports.file_system import IFileSystem
from mediasort.core.ports.tools import ILineSorter

SORTED_SUFFIX = ".sorted"


class ExternalLineSorter(ILineSorter):
    """
    Trieur de lignes base sur l'utilitaire sort.

    Le tri de lignes entieres est deterministe : deux lignes egales sont
    indiscernables, le tri est donc idempotent.
    """

    def __init__(
        self,
        executable: str = "sort",
        buffer_size: Optional[str] = None,
        temp_dir: Optional[Path] = None,
        file_system: Optional[IFileSystem] = None,
    ) -> None:
        """
        Args:
            executable: Chemin de l'utilitaire sort
            buffer_size: Taille du buffer memoire de sort (option -S, ex: "1G")
            temp_dir: Repertoire des fichiers temporaires de sort (option -T)
            file_system: Adaptateur pour le remplacement et le nettoyage
                du fichier temporaire (FileSystemAdapter par defaut)
        """
        self._executable = executable
        self._buffer_size = buffer_size
        self._temp_dir = temp_dir
        self._file_system = file_system if file_system is not None else FileSystemAdapter()

    def build_command(self) -> list[str]:
        cmd = [self._executable]
        if self._buffer_size:
            cmd += ["-S", self._buffer_size]
        if self._temp_dir is not None:
            cmd += ["-T", str(self._temp_dir)]
        return cmd

    @staticmethod
    def _sort_env() -> dict[str, str]:
        env = dict(os.environ)
        env["LC_ALL"] = "C"
        return env

    def sort_file(self, path: Path) -> None:
        """
        Trie les lignes 2..N de path et remplace le fichier.

        Raises:
            ExternalToolError: Si sort echoue ou si le fichier est illisible.
                Le fichier temporaire est supprime, l'original est intact.
        """
        temp_path = path.with_name(path.name + SORTED_SUFFIX)
        cmd = self.build_command()
        logger.debug(f"Tri de {path}")

        try:
            # Source non bufferisee : apres readline, l'offset du descripteur
            # herite par sort est exactement la fin de l'en-tete
            with open(path, "rb", buffering=0) as source, open(temp_path, "wb") as target:
                header = source.readline()
                target.write(header)
                target.flush()

                try:
                    result = subprocess.run(
                        cmd,
                        stdin=source,
                        stdout=target,
                        stderr=subprocess.PIPE,
                        env=self._sort_env(),
                    )
                except FileNotFoundError as e:
                    raise ExternalToolError("sort", detail=str(e)) from e

            if result.returncode != 0:
                raise ExternalToolError(
                    "sort",
                    result.returncode,
                    result.stderr.decode(errors="replace").strip(),
                )
            self._file_system.replace(temp_path, path)
        except ExternalToolError:
            self._file_system.delete(temp_path)
            raise
        except OSError as e:
            self._file_system.delete(temp_path)
            raise ExternalToolError("sort", detail=str(e)) from e
