"""
Service de preparation des datasets IMDb.

Orchestre les trois etapes du pipeline, chacune deleguee a un outil externe :
1. Telechargement des archives (.tsv.gz)
2. Decompression sur place
3. Tri des lignes de donnees (l'en-tete reste en premiere ligne)

Chaque etape est un appel bloquant unique ; l'etape suivante ne demarre
qu'une fois la precedente terminee.

Mode strict : la premiere ExternalToolError interrompt le pipeline.
Mode non strict : l'erreur est journalisee, enregistree dans le rapport,
et le pipeline continue.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

from loguru import logger

from mediasort.core.errors import ExternalToolError
from mediasort.core.ports.tools import IDecompressor, IDownloader, ILineSorter
from mediasort.core.value_objects.dataset import DatasetFile


@dataclass
class PipelineReport:
    """Resultat d'une execution du pipeline de datasets."""

    downloaded: list[Path] = field(default_factory=list)
    decompressed: list[Path] = field(default_factory=list)
    normalized: list[Path] = field(default_factory=list)
    failures: list[ExternalToolError] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.failures


class DatasetPipelineService:
    """
    Service orchestrant le pipeline des datasets IMDb.

    Toute la configuration (datasets, repertoire, URL, mode strict) est
    passee explicitement au constructeur.
    """

    def __init__(
        self,
        datasets: Iterable[DatasetFile],
        destination: Path,
        base_url: str,
        downloader: IDownloader,
        decompressor: IDecompressor,
        line_sorter: ILineSorter,
        strict: bool = True,
    ) -> None:
        """
        Initialise le service.

        Args:
            datasets: Datasets a traiter
            destination: Repertoire de travail (telechargement, decompression, tri)
            base_url: URL de base des datasets
            downloader: Implementation de IDownloader
            decompressor: Implementation de IDecompressor
            line_sorter: Implementation de ILineSorter
            strict: Interrompt le pipeline au premier echec si True
        """
        self._datasets = tuple(datasets)
        self._destination = Path(destination)
        self._base_url = base_url
        self._downloader = downloader
        self._decompressor = decompressor
        self._line_sorter = line_sorter
        self._strict = strict

    @property
    def datasets(self) -> tuple[DatasetFile, ...]:
        return self._datasets

    @property
    def destination(self) -> Path:
        return self._destination

    @property
    def strict(self) -> bool:
        return self._strict

    def urls(self) -> list[str]:
        """URLs completes des archives a telecharger."""
        return [dataset.url(self._base_url) for dataset in self._datasets]

    def _handle_failure(self, error: ExternalToolError, report: PipelineReport) -> None:
        report.failures.append(error)
        if self._strict:
            raise error
        logger.warning(f"{error} (mode non strict, poursuite du pipeline)")

    async def fetch(self, report: PipelineReport | None = None) -> PipelineReport:
        """Telecharge toutes les archives en un seul appel au telechargeur."""
        report = report if report is not None else PipelineReport()
        urls = self.urls()
        logger.info(f"Telechargement de {len(urls)} dataset(s) via {self._downloader.name}")
        try:
            report.downloaded.extend(await self._downloader.download(urls, self._destination))
        except ExternalToolError as e:
            self._handle_failure(e, report)
        return report

    def decompress(self, report: PipelineReport | None = None) -> PipelineReport:
        """Decompresse toutes les archives en un seul appel."""
        report = report if report is not None else PipelineReport()
        archives = [dataset.archive_path(self._destination) for dataset in self._datasets]
        logger.info(f"Decompression de {len(archives)} archive(s)")
        try:
            report.decompressed.extend(self._decompressor.decompress(archives))
        except ExternalToolError as e:
            self._handle_failure(e, report)
        return report

    def normalize(self, report: PipelineReport | None = None) -> PipelineReport:
        """Trie chaque fichier .tsv (en-tete conserve) et le remplace atomiquement."""
        report = report if report is not None else PipelineReport()
        for dataset in self._datasets:
            tsv_path = dataset.tsv_path(self._destination)
            logger.info(f"Tri de {tsv_path.name}")
            try:
                self._line_sorter.sort_file(tsv_path)
            except ExternalToolError as e:
                self._handle_failure(e, report)
                continue
            report.normalized.append(tsv_path)
        return report

    async def run(
        self,
        fetch: bool = True,
        decompress: bool = True,
        normalize: bool = True,
    ) -> PipelineReport:
        """
        Execute les etapes demandees, dans l'ordre.

        Raises:
            ExternalToolError: En mode strict, au premier echec
        """
        report = PipelineReport()
        if fetch:
            await self.fetch(report)
        if decompress:
            self.decompress(report)
        if normalize:
            self.normalize(report)
        return report
