"""
Point d'entree CLI de MediaSort.

Configure le logging et fournit les commandes CLI.
"""

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import datasets_app, rename
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="mediasort",
    help="Preparation des datasets IMDb et renommage de videos",
)
container = Container()


# Monter les commandes
app.command()(rename)

# Monter datasets_app comme sous-commande
app.add_typer(datasets_app, name="datasets")


def get_config() -> Settings:
    """Recupere les parametres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    typer.echo(f"Datasets : {config.datasets_dir}")
    typer.echo(f"Source : {config.datasets_base_url}")
    typer.echo(f"Fichiers : {', '.join(config.dataset_names)}")
    typer.echo(f"Telechargeur : {config.downloader}")
    typer.echo(f"Mode strict : {'oui' if config.strict else 'non'}")
    typer.echo(f"Extensions media : {', '.join(config.media_extensions)}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"MediaSort v{__version__}")


def main() -> None:
    """Point d'entree de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.info("Demarrage de MediaSort", version=__version__)

    app()


if __name__ == "__main__":
    main()
