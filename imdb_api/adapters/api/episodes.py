"""
Agregation des episodes d'une serie.

Une requete par saison est emise en parallele (asyncio.gather), puis les
reponses sont parcourues par ordre de saison croissant. Tout ou rien :
la premiere saison en erreur fait echouer l'ensemble, sans liste partielle.
Les requetes deja en vol ne sont pas annulees, leurs resultats sont ignores.
"""

import asyncio
from typing import Any, Mapping

from loguru import logger

from imdb_api.adapters.api.builders import build_episode
from imdb_api.adapters.api.classifier import PayloadKind, classify_collection, error_message
from imdb_api.core.entities import Episode, TVShow
from imdb_api.core.errors import ClassificationError, UpstreamError
from imdb_api.core.ports import ITransport
from imdb_api.core.value_objects import MovieOptions


def season_params(series_id: str, season: int, api_key: str) -> dict[str, str]:
    """Parametres de requete d'une saison."""
    return {
        "Season": str(season),
        "apikey": api_key,
        "i": series_id,
        "r": "json",
    }


def season_episodes(
    payload: Mapping[str, Any], season: int, series_id: str
) -> list[Episode]:
    """
    Construit les episodes d'une reponse de saison.

    La saison est celle demandee, pas celle annoncee par OMDb. Episodes
    peut etre une liste ou un objet indexe par ordinal ; l'ordre OMDb
    est conserve.
    """
    entries = payload.get("Episodes") or []
    if isinstance(entries, Mapping):
        entries = list(entries.values())
    return [
        build_episode(entry, season=season, series_id=series_id)
        for entry in entries
        if isinstance(entry, Mapping)
    ]


class EpisodeAggregator:
    """
    Recupere et aplatit les episodes de toutes les saisons d'une serie.

    Example:
        aggregator = EpisodeAggregator(transport, "https://www.omdbapi.com")
        episodes = await aggregator.fetch_episodes(show, options)
    """

    def __init__(
        self,
        transport: ITransport,
        base_url: str,
        headers: Mapping[str, str],
    ) -> None:
        self._transport = transport
        self._base_url = base_url
        self._headers = dict(headers)

    async def _fetch_season(
        self, series_id: str, season: int, options: MovieOptions
    ) -> Any:
        return await self._transport.request(
            self._base_url,
            season_params(series_id, season, options.api_key or ""),
            headers=self._headers,
            timeout=options.timeout,
        )

    async def fetch_episodes(
        self, show: TVShow, options: MovieOptions
    ) -> tuple[Episode, ...]:
        """
        Recupere les episodes des saisons 1 a show.total_seasons.

        Args:
            show: Serie dont on veut les episodes
            options: Options utilisees pour chaque requete de saison

        Returns:
            Episodes aplatis, saisons par ordre croissant

        Raises:
            UpstreamError: Si OMDb renvoie une erreur pour une saison
            ClassificationError: Si une reponse n'est pas une saison
        """
        seasons = range(1, show.total_seasons + 1)
        logger.debug(f"Recuperation de {len(seasons)} saison(s) pour {show.imdb_id}")

        payloads = await asyncio.gather(
            *(self._fetch_season(show.imdb_id, season, options) for season in seasons)
        )

        episodes: list[Episode] = []
        for season, payload in zip(seasons, payloads):
            match classify_collection(payload):
                case PayloadKind.ERROR:
                    raise UpstreamError(error_message(payload))
                case PayloadKind.SEASON:
                    episodes.extend(season_episodes(payload, season, show.imdb_id))
                case _:
                    raise ClassificationError(
                        f"season {season} of {show.imdb_id} is not a season listing"
                    )

        logger.debug(f"{len(episodes)} episode(s) recupere(s) pour {show.imdb_id}")
        return tuple(episodes)
