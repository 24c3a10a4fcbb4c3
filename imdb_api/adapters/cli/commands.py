"""
Commandes CLI de consultation OMDb : get, search, episodes.
"""

import asyncio
import re
from typing import Annotated, Optional

import typer
from rich.panel import Panel
from rich.table import Table

from imdb_api.adapters.cli.helpers import console, handle_errors, with_container
from imdb_api.core.entities import Episode, MediaKind, Movie, SearchResultPage, TVShow
from imdb_api.core.errors import ValidationError
from imdb_api.core.value_objects import MovieRequest, RequestType, SearchRequest

IMDB_ID_PATTERN = re.compile(r"^tt\d+$")


def _render_record(record: Movie) -> Panel:
    """Construit le panneau Rich d'un enregistrement."""
    lines = [
        f"[bold]{record.title}[/bold] ({record.year_data or '?'})",
        f"Type : {record.kind.value}",
        f"IMDb : {record.imdb_url}",
        f"Note : {record.rating} ({record.votes} votes)",
        f"Genres : {record.genres}",
        f"Realisation : {record.director}",
        f"Acteurs : {record.actors}",
    ]
    if record.released:
        lines.append(f"Sortie : {record.released.isoformat()}")

    match record.kind:
        case MediaKind.TVSHOW:
            end_year = record.end_year or "en cours"
            lines.append(f"Diffusion : {record.start_year} - {end_year}")
            lines.append(f"Saisons : {record.total_seasons}")
        case MediaKind.EPISODE:
            lines.append(f"Saison {record.season}, episode {record.episode_number}")
            lines.append(f"Serie : {record.series_id}")
        case _:
            pass

    if record.plot:
        lines.append("")
        lines.append(record.plot)
    return Panel("\n".join(lines), title=record.imdb_id, border_style="cyan")


def _render_page(page: SearchResultPage) -> Table:
    """Construit la table Rich d'une page de recherche."""
    table = Table(
        title=f"Page {page.page} - {page.total_results} resultat(s) au total",
        show_header=True,
    )
    table.add_column("IMDb", style="cyan")
    table.add_column("Titre")
    table.add_column("Annee", justify="right")
    table.add_column("Type", style="dim")
    for result in page.results:
        table.add_row(
            result.imdb_id,
            result.title,
            str(result.year) if result.year is not None else "",
            result.type,
        )
    return table


def _render_episodes(episodes: tuple[Episode, ...]) -> Table:
    """Construit la table Rich des episodes d'une serie."""
    table = Table(title=f"{len(episodes)} episode(s)", show_header=True)
    table.add_column("S", justify="right")
    table.add_column("E", justify="right")
    table.add_column("Titre")
    table.add_column("Note", justify="right")
    table.add_column("IMDb", style="cyan")
    for episode in episodes:
        table.add_row(
            str(episode.season),
            str(episode.episode_number) if episode.episode_number is not None else "",
            episode.title,
            f"{episode.rating:.1f}",
            episode.imdb_id,
        )
    return table


def get(
    name: Annotated[Optional[str], typer.Argument(help="Titre du media")] = None,
    imdb_id: Annotated[
        Optional[str], typer.Option("--id", "-i", help="Identifiant IMDb (tt...)")
    ] = None,
    year: Annotated[Optional[int], typer.Option("--year", "-y", help="Annee de sortie")] = None,
    short_plot: Annotated[
        bool, typer.Option("--short-plot", help="Resume court au lieu du resume complet")
    ] = False,
) -> None:
    """Affiche un film, une serie, un episode ou un jeu."""
    request = MovieRequest(name=name, id=imdb_id, year=year, short_plot=short_plot)
    with handle_errors():
        asyncio.run(_get_async(request))


@with_container()
async def _get_async(container, request: MovieRequest) -> None:
    """Implementation async de la commande get."""
    client = container.client()
    record = await client.get(request)
    console.print(_render_record(record))


def search(
    name: Annotated[str, typer.Argument(help="Titre recherche")],
    media_type: Annotated[
        Optional[RequestType], typer.Option("--type", "-t", help="Type de media")
    ] = None,
    year: Annotated[Optional[int], typer.Option("--year", "-y", help="Annee de sortie")] = None,
    page: Annotated[int, typer.Option("--page", "-p", min=1, help="Numero de page")] = 1,
) -> None:
    """Recherche des medias par titre."""
    request = SearchRequest(name=name, type=media_type, year=year)
    with handle_errors():
        asyncio.run(_search_async(request, page))


@with_container()
async def _search_async(container, request: SearchRequest, page: int) -> None:
    """Implementation async de la commande search."""
    client = container.client()
    result_page = await client.search(request, page=page)
    if not result_page.results:
        console.print("[yellow]Aucun resultat.[/yellow]")
        return
    console.print(_render_page(result_page))


def episodes(
    id_or_name: Annotated[
        str, typer.Argument(help="Identifiant IMDb (tt...) ou titre de la serie")
    ],
) -> None:
    """Liste les episodes de toutes les saisons d'une serie."""
    with handle_errors():
        asyncio.run(_episodes_async(_series_request(id_or_name)))


def _series_request(id_or_name: str) -> MovieRequest:
    """Un identifiant IMDb est envoye comme id, tout le reste comme titre."""
    if IMDB_ID_PATTERN.match(id_or_name):
        return MovieRequest(id=id_or_name)
    return MovieRequest(name=id_or_name)


@with_container()
async def _episodes_async(container, request: MovieRequest) -> None:
    """Implementation async de la commande episodes."""
    client = container.client()
    record = await client.get(request)
    if not isinstance(record, TVShow):
        raise ValidationError(
            f"{request.query_term} n'est pas une serie ({record.kind.value})"
        )

    with console.status(f"Recuperation de {record.total_seasons} saison(s)..."):
        show_episodes = await client.episodes(record)
    console.print(_render_episodes(show_episodes))
