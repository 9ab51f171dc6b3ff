"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI.
"""

from dependency_injector import containers, providers

from .adapters.file_system import FileSystemAdapter
from .adapters.imdb import (
    Aria2Downloader,
    ExternalLineSorter,
    HttpDatasetDownloader,
    PigzDecompressor,
)
from .config import Settings
from .core.value_objects import DatasetFile
from .services.dataset_pipeline import DatasetPipelineService
from .services.media_renamer import MediaRenamerService


def build_datasets(names: tuple[str, ...]) -> tuple[DatasetFile, ...]:
    """Construit les DatasetFile a partir des noms configures."""
    return tuple(DatasetFile(name) for name in names)


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        renamer = container.media_renamer_service()
        pipeline = container.dataset_pipeline(destination=Path("datasets"), strict=False)
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Adapters - implementations concretes des ports
    file_system = providers.Singleton(FileSystemAdapter)

    aria2_downloader = providers.Factory(
        Aria2Downloader,
        executable=config.provided.aria2c_path,
        connections=config.provided.aria2c_connections,
    )
    http_downloader = providers.Factory(
        HttpDatasetDownloader,
        timeout=config.provided.http_timeout,
    )
    # Telechargeur choisi selon Settings.downloader ("aria2c" ou "http")
    downloader = providers.Selector(
        config.provided.downloader,
        aria2c=aria2_downloader,
        http=http_downloader,
    )
    decompressor = providers.Factory(
        PigzDecompressor,
        executable=config.provided.pigz_path,
    )
    line_sorter = providers.Factory(
        ExternalLineSorter,
        executable=config.provided.sort_path,
        buffer_size=config.provided.sort_buffer_size,
        file_system=file_system,
    )

    datasets = providers.Callable(build_datasets, config.provided.dataset_names)

    # Services
    media_renamer_service = providers.Factory(
        MediaRenamerService,
        file_system=file_system,
        media_extensions=config.provided.media_extensions,
        verify_signature=config.provided.verify_signature,
    )

    # Pipeline - Factory car destination et strict peuvent etre surcharges par la CLI
    # Utiliser: container.dataset_pipeline(destination=Path(...), strict=False)
    dataset_pipeline = providers.Factory(
        DatasetPipelineService,
        datasets=datasets,
        destination=config.provided.datasets_dir,
        base_url=config.provided.datasets_base_url,
        downloader=downloader,
        decompressor=decompressor,
        line_sorter=line_sorter,
        strict=config.provided.strict,
    )
