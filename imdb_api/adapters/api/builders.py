"""
Construction des enregistrements du domaine a partir des reponses OMDb.

Chaque builder recoit un payload deja classe, le normalise et produit
exactement un type d'enregistrement en appliquant ses invariants.
"""

import re
from typing import Any, Mapping, Optional

from imdb_api.adapters.api.classifier import PayloadKind
from imdb_api.adapters.api.normalizer import normalize, parse_int, split_variant_fields
from imdb_api.core.entities import (
    Episode,
    Game,
    Movie,
    SearchResult,
    SearchResultPage,
    TVShow,
)
from imdb_api.core.entities.media import EpisodeFetcher, SearchFunction
from imdb_api.core.errors import ClassificationError, ParseError
from imdb_api.core.value_objects import MovieOptions, SearchRequest

_YEAR_SEPARATOR = re.compile(r"[-–]")


def build_movie(payload: Mapping[str, Any]) -> Movie:
    """Construit un Movie depuis un payload classe MOVIE."""
    common, _ = split_variant_fields(normalize(payload))
    return Movie(**common)


def build_game(payload: Mapping[str, Any]) -> Game:
    """Construit un Game depuis un payload classe GAME."""
    common, _ = split_variant_fields(normalize(payload))
    return Game(**common)


def build_episode(
    payload: Mapping[str, Any],
    season: Optional[int] = None,
    series_id: Optional[str] = None,
) -> Episode:
    """
    Construit un Episode.

    Args:
        payload: Episode OMDb (reponse directe ou entree d'une saison)
        season: Saison imposee par l'appelant ; si None, lue dans le payload
        series_id: Id de la serie parente si le payload ne le fournit pas

    Returns:
        Episode construit

    Raises:
        ParseError: Si la saison (quand elle est lue) ou le numero d'episode
            present dans le payload n'est pas un entier
    """
    common, variant = split_variant_fields(
        normalize(payload), consumed=frozenset({"season", "episode", "series_id"})
    )

    if season is None:
        season = parse_int(variant.get("season"))
        if season is None:
            raise ParseError("invalid season")

    episode_number = None
    if "episode" in variant:
        episode_number = parse_int(variant["episode"])
        if episode_number is None:
            raise ParseError("invalid episode")

    return Episode(
        **common,
        season=season,
        episode_number=episode_number,
        series_id=variant.get("series_id") or series_id,
    )


def split_year_range(year_data: str) -> tuple[Optional[int], Optional[int]]:
    """
    Decoupe une plage d'annees OMDb.

    "2015-2019" -> (2015, 2019), "2015–" -> (2015, None), "2015" -> (2015, None).
    Une annee de fin nulle ou non numerique donne None.
    """
    parts = _YEAR_SEPARATOR.split(year_data, maxsplit=1)
    start_year = parse_int(parts[0])
    end_year = parse_int(parts[1]) if len(parts) > 1 else None
    return start_year, end_year or None


def build_tvshow(
    payload: Mapping[str, Any],
    options: MovieOptions,
    episode_fetcher: Optional[EpisodeFetcher] = None,
) -> TVShow:
    """
    Construit un TVShow.

    Args:
        payload: Serie OMDb
        options: Options utilisees pour la requete, conservees pour les episodes
        episode_fetcher: Fonction de recuperation des episodes par saison

    Returns:
        TVShow avec cache d'episodes vide
    """
    common, variant = split_variant_fields(
        normalize(payload), consumed=frozenset({"total_seasons"})
    )
    start_year, end_year = split_year_range(common.get("year_data", ""))
    total_seasons = parse_int(variant.get("total_seasons")) or 0

    return TVShow(
        **common,
        start_year=start_year,
        end_year=end_year,
        total_seasons=total_seasons,
        _options=options,
        _episode_fetcher=episode_fetcher,
    )


def build_record(
    kind: PayloadKind,
    payload: Mapping[str, Any],
    options: MovieOptions,
    episode_fetcher: Optional[EpisodeFetcher] = None,
) -> Movie:
    """
    Construit l'enregistrement correspondant a la classification.

    Raises:
        ClassificationError: Si kind ne designe pas une variante de Movie
    """
    match kind:
        case PayloadKind.MOVIE:
            return build_movie(payload)
        case PayloadKind.GAME:
            return build_game(payload)
        case PayloadKind.SERIES:
            return build_tvshow(payload, options, episode_fetcher)
        case PayloadKind.EPISODE:
            return build_episode(payload)
        case _:
            raise ClassificationError(f"type: '{payload.get('Type')}' is not valid")


def build_search_result(payload: Mapping[str, Any]) -> SearchResult:
    """Construit un SearchResult ; l'annee est lue en tete du champ Year."""
    return SearchResult(
        title=payload.get("Title", ""),
        year=parse_int(payload.get("Year")),
        imdb_id=payload.get("imdbID", ""),
        type=payload.get("Type", ""),
        poster=payload.get("Poster", ""),
    )


def build_search_page(
    payload: Mapping[str, Any],
    page: int,
    options: MovieOptions,
    request: SearchRequest,
    searcher: Optional[SearchFunction] = None,
) -> SearchResultPage:
    """
    Construit une page de resultats chainable.

    Args:
        payload: Reponse OMDb de recherche (Search, totalResults)
        page: Numero de la page demandee
        options: Options de la requete, reutilisees par next()
        request: Requete d'origine, reutilisee par next()
        searcher: Fonction de recherche appelee par next()
    """
    results = tuple(
        build_search_result(item)
        for item in payload.get("Search") or []
        if isinstance(item, Mapping)
    )
    return SearchResultPage(
        results=results,
        total_results=parse_int(payload.get("totalResults")) or 0,
        page=page,
        options=options,
        request=request,
        _searcher=searcher,
    )
