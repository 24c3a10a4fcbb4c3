"""
Point d'entree CLI de imdb-api.

Configure le logging et fournit les commandes CLI.
"""

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import episodes, get, search
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="imdb-api",
    help="Consultation des metadonnees OMDb (films, series, episodes, jeux)",
)
container = Container()

app.command()(get)
app.command()(search)
app.command()(episodes)


def get_config() -> Settings:
    """Recupere les parametres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    typer.echo(f"API OMDb : {config.base_url}")
    typer.echo(f"Cle API : {'configuree' if config.api_enabled else 'absente'}")
    typer.echo(f"Timeout : {config.timeout if config.timeout else 'defaut'}")
    typer.echo(f"Niveau de log : {config.log_level}")
    typer.echo(f"Fichier de log : {config.log_file}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"imdb-api v{__version__}")


def main() -> None:
    """Point d'entree de l'application."""
    settings = container.config()
    configure_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )

    logger.info("Demarrage de imdb-api", version=__version__)

    app()


if __name__ == "__main__":
    main()
