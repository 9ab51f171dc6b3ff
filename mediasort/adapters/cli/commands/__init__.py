"""Sous-package CLI commands - re-exporte les commandes publiques."""

from mediasort.adapters.cli.commands.datasets_commands import (
    DownloaderChoice,
    datasets_app,
    datasets_fetch,
    datasets_sort,
    datasets_sync,
)
from mediasort.adapters.cli.commands.rename_command import (
    rename,
)

__all__ = [
    # datasets
    "DownloaderChoice",
    "datasets_app",
    "datasets_fetch",
    "datasets_sort",
    "datasets_sync",
    # renommage
    "rename",
]
