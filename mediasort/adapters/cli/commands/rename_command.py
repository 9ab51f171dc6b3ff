"""
Commande CLI de renommage des fichiers media.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from mediasort.adapters.cli.helpers import console, suppress_loguru, with_container
from mediasort.core.errors import MediaSortError
from mediasort.services.media_renamer import RenameReport


def rename(
    directory: Annotated[
        Path,
        typer.Argument(help="Repertoire a scanner"),
    ] = Path("."),
    recursive: Annotated[
        bool,
        typer.Option("--recursive", "-r", help="Parcourir aussi les sous-repertoires"),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Afficher les renommages sans les effectuer"),
    ] = False,
) -> None:
    """Renomme les fichiers media au format Titre-SxxExx-qualite.ext."""
    _rename(directory, recursive, dry_run)


@with_container()
def _rename(container, directory: Path, recursive: bool, dry_run: bool) -> None:
    """Implementation de la commande rename."""
    if not directory.is_dir():
        console.print(f"[red]Erreur:[/red] {directory} n'est pas un repertoire", soft_wrap=True)
        raise typer.Exit(code=1)

    renamer = container.media_renamer_service()

    with suppress_loguru():
        try:
            report = renamer.rename_directory(directory, recursive=recursive, dry_run=dry_run)
        except MediaSortError as e:
            console.print(f"[red]Erreur:[/red] {e}", soft_wrap=True)
            raise typer.Exit(code=1)

    _render_report(report)


def _render_report(report: RenameReport) -> None:
    """Affiche les renommages, les collisions et le resume."""
    prefix = "[dim](dry-run)[/dim] " if report.dry_run else ""
    for operation in report.renamed:
        console.print(
            f'{prefix}Renommage "{operation.source.name}" -> "{operation.target.name}"',
            highlight=False,
            soft_wrap=True,
        )

    if report.collisions:
        table = Table(title="Collisions (fichiers non renommes)")
        table.add_column("Source")
        table.add_column("Cible")
        table.add_column("Raison")
        for collision in report.collisions:
            table.add_row(
                collision.source.name,
                collision.target.name,
                collision.reason.value,
            )
        console.print(table)

    console.print("\n[bold]Resume:[/bold]")
    console.print(f"  [green]{len(report.renamed)}[/green] renomme(s)")
    if report.unchanged:
        console.print(f"  [dim]{len(report.unchanged)} deja normalise(s)[/dim]")
    if report.collisions:
        console.print(f"  [yellow]{len(report.collisions)}[/yellow] collision(s)")
    console.print(f"  [dim]{report.ignored} entree(s) ignoree(s)[/dim]")
