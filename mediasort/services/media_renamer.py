"""
Service de renommage des fichiers media.

Parcourt un repertoire (optionnellement recursif), classe chaque fichier
media et le renomme selon le format :

    {Titre}-{EPISODE}-{qualite}.{ext}

Les renommages d'un meme niveau de repertoire sont d'abord planifies,
puis executes sequentiellement. La planification detecte les collisions
(deux fichiers vers la meme cible, ou cible deja presente sur disque) :
les fichiers en collision ne sont pas renommes.

Un fichier n'est renomme que si son contenu commence par une signature
MKV ou MP4 (voir media_signature), sauf si la verification est desactivee.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable

from loguru import logger

from mediasort.core.errors import RenameError, ScanError
from mediasort.core.ports.file_system import IFileSystem
from mediasort.services.filename_classifier import classify
from mediasort.services.media_signature import SIGNATURE_SIZE, detect_container
from mediasort.utils.constants import MEDIA_EXTENSIONS


class CollisionReason(str, Enum):
    """Raison pour laquelle un renommage n'a pas ete effectue."""

    DUPLICATE_TARGET = "duplicate_target"
    TARGET_EXISTS = "target_exists"


@dataclass(frozen=True)
class RenameOperation:
    """Renommage planifie ou effectue."""

    source: Path
    target: Path


@dataclass(frozen=True)
class RenameCollision:
    """
    Renommage refuse pour cause de collision.

    Attributs:
        source: Fichier qui devait etre renomme
        target: Cible calculee
        reason: DUPLICATE_TARGET si un autre fichier du repertoire vise la meme
                cible, TARGET_EXISTS si la cible existe deja sur disque
    """

    source: Path
    target: Path
    reason: CollisionReason


@dataclass
class RenameReport:
    """Rapport d'un scan de renommage (tous repertoires visites confondus)."""

    renamed: list[RenameOperation] = field(default_factory=list)
    unchanged: list[Path] = field(default_factory=list)
    collisions: list[RenameCollision] = field(default_factory=list)
    ignored: int = 0
    directories: int = 0
    dry_run: bool = False

    @property
    def has_collisions(self) -> bool:
        return bool(self.collisions)


class MediaRenamerService:
    """
    Service de renommage des fichiers media d'un repertoire.

    Coordonne:
    - Le systeme de fichiers (IFileSystem) pour lister et renommer
    - Le classifieur de noms pour calculer les noms normalises
    """

    def __init__(
        self,
        file_system: IFileSystem,
        media_extensions: Iterable[str] = MEDIA_EXTENSIONS,
        verify_signature: bool = True,
    ) -> None:
        """
        Initialise le service de renommage.

        Args:
            file_system: Implementation de IFileSystem pour les operations fichiers
            media_extensions: Extensions acceptees (minuscules, sans point)
            verify_signature: Si True, un fichier dont le contenu n'est pas
                un conteneur video reconnu (MKV, MP4) est ignore
        """
        self._file_system = file_system
        self._media_extensions = tuple(ext.lower() for ext in media_extensions)
        self._verify_signature = verify_signature

    def rename_directory(
        self,
        root: Path,
        recursive: bool = False,
        dry_run: bool = False,
    ) -> RenameReport:
        """
        Renomme les fichiers media d'un repertoire.

        Args:
            root: Repertoire a scanner
            recursive: Descend dans les sous-repertoires si True
            dry_run: Calcule le plan sans renommer

        Returns:
            RenameReport cumule sur tous les repertoires visites

        Raises:
            RenameError: Si un renommage echoue (le scan est interrompu)
            ScanError: Si un repertoire ne peut pas etre liste
        """
        report = RenameReport(dry_run=dry_run)
        self._process_directory(Path(root), recursive, dry_run, report)
        return report

    def plan_directory(
        self, directory: Path
    ) -> tuple[list[RenameOperation], list[Path], list[RenameCollision], list[Path], int]:
        """
        Planifie les renommages d'un seul niveau de repertoire.

        Returns:
            Tuple (operations, inchanges, collisions, sous-repertoires, ignores)

        Raises:
            ScanError: Si le repertoire ne peut pas etre liste
        """
        operations: list[RenameOperation] = []
        unchanged: list[Path] = []
        collisions: list[RenameCollision] = []
        subdirectories: list[Path] = []
        ignored = 0
        claimed: set[str] = set()

        try:
            entries = self._file_system.list_entries(directory)
        except OSError as e:
            raise ScanError(directory, e) from e

        for entry in entries:
            if self._file_system.is_symlink(entry):
                ignored += 1
                continue
            if self._file_system.is_dir(entry):
                subdirectories.append(entry)
                continue
            if not self._file_system.is_file(entry):
                ignored += 1
                continue

            media_name = classify(entry.name, self._media_extensions)
            if media_name is None:
                ignored += 1
                continue

            if self._verify_signature and not self._has_video_signature(entry):
                ignored += 1
                continue

            target_name = media_name.target_filename()
            target = directory / target_name

            if target_name == entry.name:
                unchanged.append(entry)
                claimed.add(target_name)
                continue

            if target_name in claimed:
                collisions.append(
                    RenameCollision(entry, target, CollisionReason.DUPLICATE_TARGET)
                )
                continue

            if self._file_system.exists(target):
                collisions.append(
                    RenameCollision(entry, target, CollisionReason.TARGET_EXISTS)
                )
                continue

            claimed.add(target_name)
            operations.append(RenameOperation(entry, target))

        return operations, unchanged, collisions, subdirectories, ignored

    def _has_video_signature(self, path: Path) -> bool:
        """Verifie que le contenu de path commence par une signature MKV ou MP4."""
        try:
            header = self._file_system.read_header(path, SIGNATURE_SIZE)
        except OSError as e:
            logger.warning(f'Lecture impossible de "{path.name}": {e}, fichier ignore')
            return False

        if detect_container(header) is None:
            logger.debug(f'"{path.name}" n\'est pas un conteneur video reconnu, fichier ignore')
            return False
        return True

    def _process_directory(
        self,
        directory: Path,
        recursive: bool,
        dry_run: bool,
        report: RenameReport,
    ) -> None:
        operations, unchanged, collisions, subdirectories, ignored = self.plan_directory(
            directory
        )
        report.directories += 1
        report.unchanged.extend(unchanged)
        report.ignored += ignored

        for collision in collisions:
            logger.warning(
                f'Collision: "{collision.source.name}" -> "{collision.target.name}" '
                f"({collision.reason.value}), fichier ignore"
            )
        report.collisions.extend(collisions)

        for operation in operations:
            logger.info(f'Renommage "{operation.source.name}" -> "{operation.target.name}"')
            if not dry_run:
                try:
                    self._file_system.rename(operation.source, operation.target)
                except OSError as e:
                    raise RenameError(operation.source, operation.target, e) from e
            report.renamed.append(operation)

        if not recursive:
            return

        for subdirectory in subdirectories:
            # Chemin complet : la recursion fonctionne a n'importe quelle profondeur
            self._process_directory(subdirectory, recursive, dry_run, report)
