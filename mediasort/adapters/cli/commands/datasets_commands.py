"""
Commandes CLI pour la preparation des datasets IMDb (fetch, sort, sync).
"""

import asyncio
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.status import Status

from mediasort.adapters.cli.helpers import console, suppress_loguru, with_container
from mediasort.core.errors import ExternalToolError
from mediasort.services.dataset_pipeline import PipelineReport


class DownloaderChoice(str, Enum):
    """Telechargeurs disponibles."""

    ARIA2C = "aria2c"
    HTTP = "http"


# Application Typer pour les commandes de datasets
datasets_app = typer.Typer(
    name="datasets",
    help="Telechargement et tri des datasets IMDb",
    rich_markup_mode="rich",
)

DestOption = Annotated[
    Optional[Path],
    typer.Option("--dest", "-d", help="Repertoire des datasets (defaut: configuration)"),
]
StrictOption = Annotated[
    Optional[bool],
    typer.Option(
        "--strict/--no-strict",
        help="Arreter au premier echec d'un outil externe",
    ),
]
DownloaderOption = Annotated[
    Optional[DownloaderChoice],
    typer.Option("--downloader", help="Telechargeur a utiliser (defaut: configuration)"),
]


@datasets_app.command("fetch")
def datasets_fetch(
    dest: DestOption = None,
    strict: StrictOption = None,
    downloader: DownloaderOption = None,
) -> None:
    """Telecharge et decompresse les datasets IMDb."""
    asyncio.run(
        _run_pipeline_async(dest, strict, downloader, fetch=True, decompress=True, normalize=False)
    )


@datasets_app.command("sort")
def datasets_sort(
    dest: DestOption = None,
    strict: StrictOption = None,
) -> None:
    """Trie les datasets decompresses (l'en-tete reste en premiere ligne)."""
    asyncio.run(
        _run_pipeline_async(dest, strict, None, fetch=False, decompress=False, normalize=True)
    )


@datasets_app.command("sync")
def datasets_sync(
    dest: DestOption = None,
    strict: StrictOption = None,
    downloader: DownloaderOption = None,
) -> None:
    """Telecharge, decompresse puis trie les datasets IMDb."""
    asyncio.run(
        _run_pipeline_async(dest, strict, downloader, fetch=True, decompress=True, normalize=True)
    )


@with_container()
async def _run_pipeline_async(
    container,
    dest: Optional[Path],
    strict: Optional[bool],
    downloader: Optional[DownloaderChoice],
    fetch: bool,
    decompress: bool,
    normalize: bool,
) -> None:
    """Implementation async commune aux commandes datasets."""
    overrides = {}
    if dest is not None:
        overrides["destination"] = dest.expanduser()
    if strict is not None:
        overrides["strict"] = strict
    if downloader == DownloaderChoice.ARIA2C:
        overrides["downloader"] = container.aria2_downloader()
    elif downloader == DownloaderChoice.HTTP:
        overrides["downloader"] = container.http_downloader()

    pipeline = container.dataset_pipeline(**overrides)
    mode = "strict" if pipeline.strict else "non strict"
    console.print(
        f"[bold cyan]Datasets IMDb[/bold cyan]: {len(pipeline.datasets)} fichier(s) "
        f"dans [bold]{pipeline.destination}[/bold] (mode {mode})"
    )

    with suppress_loguru():
        try:
            with Status("[cyan]Traitement des datasets...", console=console):
                report = await pipeline.run(
                    fetch=fetch, decompress=decompress, normalize=normalize
                )
        except ExternalToolError as e:
            console.print(f"[red]Erreur:[/red] {e}", soft_wrap=True)
            raise typer.Exit(code=1)

    _render_report(report)


def _render_report(report: PipelineReport) -> None:
    """Affiche le resume d'une execution du pipeline."""
    console.print("\n[bold]Resume:[/bold]")
    if report.downloaded:
        console.print(f"  [green]{len(report.downloaded)}[/green] fichier(s) telecharge(s)")
    if report.decompressed:
        console.print(f"  [green]{len(report.decompressed)}[/green] fichier(s) decompresse(s)")
    if report.normalized:
        console.print(f"  [green]{len(report.normalized)}[/green] fichier(s) trie(s)")
    for failure in report.failures:
        console.print(f"  [yellow]![/yellow] {failure}")
