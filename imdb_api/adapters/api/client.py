"""
Client OMDb : orchestration des requetes get et search.

Le Client porte les options de base, fusionne les options de chaque appel,
construit les parametres de requete, appelle le transport puis classe et
construit la reponse.

Usage:
    client = Client(MovieOptions(api_key="xxxxxx", timeout=30))
    movie = await client.get(MovieRequest(name="The Toxic Avenger"))
    page = await client.search(SearchRequest(name="The Toxic Avenger"))
    for result in page.results:
        print(result.title)
    await client.close()
"""

from typing import Any, Mapping, Optional

from loguru import logger

from imdb_api.adapters.api.builders import build_record, build_search_page
from imdb_api.adapters.api.classifier import (
    PayloadKind,
    classify,
    classify_collection,
    error_message,
    type_tag,
)
from imdb_api.adapters.api.episodes import EpisodeAggregator
from imdb_api.adapters.api.transport import HttpxTransport
from imdb_api.core.entities import Episode, Movie, SearchResultPage, TVShow
from imdb_api.core.errors import ClassificationError, UpstreamError, ValidationError
from imdb_api.core.ports import ITransport
from imdb_api.core.value_objects import MovieOptions, MovieRequest, SearchRequest

OMDB_URL = "https://www.omdbapi.com"

DEFAULT_HEADERS = {"Content-Type": "application/json"}


def get_params(request: MovieRequest, api_key: str) -> dict[str, str]:
    """
    Parametres d'une requete d'element unique.

    Raises:
        ValidationError: Si ni request.name ni request.id n'est fourni
    """
    params = {
        "apikey": api_key,
        "plot": "short" if request.short_plot else "full",
        "r": "json",
    }
    if request.year is not None:
        params["y"] = str(request.year)

    if request.name:
        params["t"] = request.name
    elif request.id:
        params["i"] = request.id
    else:
        raise ValidationError("Missing one of request.id or request.name")
    return params


def search_params(request: SearchRequest, api_key: str, page: int) -> dict[str, str]:
    """Parametres d'une requete de recherche."""
    params = {
        "apikey": api_key,
        "s": request.name,
        "page": str(page),
        "r": "json",
    }
    if request.year is not None:
        params["y"] = str(request.year)
    if request.type is not None:
        params["type"] = getattr(request.type, "value", str(request.type))
    return params


class Client:
    """
    Client pour recuperer les informations OMDb.

    Evite de repasser les MovieOptions a chaque appel. Chaque methode
    accepte des options de surcharge, fusionnees par-dessus celles du
    client (les options de l'appel l'emportent).

    Les enregistrements gardent un lien vers le client : show.episodes() et
    page.next() doivent etre appeles avant close(), sinon ImdbError.

    Example:
        async with Client(MovieOptions(api_key="xxxxxx")) as client:
            show = await client.get(MovieRequest(id="tt0944947"))
            if isinstance(show, TVShow):
                episodes = await show.episodes()
    """

    def __init__(
        self,
        options: MovieOptions,
        transport: Optional[ITransport] = None,
        base_url: str = OMDB_URL,
    ) -> None:
        """
        Initialise le client.

        Args:
            options: Options appliquees a toutes les requetes sauf surcharge
            transport: Transport HTTP ; un HttpxTransport est cree si None
            base_url: URL de l'API OMDb

        Raises:
            ValidationError: Si options ne contient pas de cle API
        """
        if options is None or not options.api_key:
            raise ValidationError("Missing api key in options")
        self._options = options
        self._owns_transport = transport is None
        self._transport = transport if transport is not None else HttpxTransport()
        self._base_url = base_url
        self._aggregator = EpisodeAggregator(
            self._transport, base_url, headers=DEFAULT_HEADERS
        )

    @property
    def options(self) -> MovieOptions:
        """Options de base du client."""
        return self._options

    async def _request(self, params: dict[str, str], options: MovieOptions) -> Any:
        return await self._transport.request(
            self._base_url,
            params,
            headers=DEFAULT_HEADERS,
            timeout=options.timeout,
        )

    async def get(
        self, request: MovieRequest, options: Optional[MovieOptions] = None
    ) -> Movie:
        """
        Recupere un element unique par titre ou par id.

        Args:
            request: Criteres de l'element recherche
            options: Options surchargeant celles du client

        Returns:
            Movie, Game, TVShow ou Episode selon le type OMDb

        Raises:
            ValidationError: Si ni name ni id n'est fourni (aucune requete emise)
            UpstreamError: Si OMDb renvoie une erreur
            ClassificationError: Si le type OMDb est inconnu
            ParseError: Si un champ numerique obligatoire est invalide
        """
        merged = self._options.merge(options)
        params = get_params(request, merged.api_key or "")

        logger.debug(f"OMDb get: {request.query_term}")
        payload = await self._request(params, merged)

        kind = classify(payload)
        match kind:
            case PayloadKind.ERROR:
                raise UpstreamError(f"{error_message(payload)}: {request.query_term}")
            case PayloadKind.UNKNOWN:
                raise ClassificationError(f"type: '{type_tag(payload)}' is not valid")
            case _:
                return build_record(
                    kind,
                    payload,
                    options=merged,
                    episode_fetcher=self._aggregator.fetch_episodes,
                )

    async def search(
        self,
        request: SearchRequest,
        page: int = 1,
        options: Optional[MovieOptions] = None,
    ) -> SearchResultPage:
        """
        Recherche des medias par titre.

        Args:
            request: Criteres de recherche
            page: Numero de page (1 par defaut)
            options: Options surchargeant celles du client

        Returns:
            Page de resultats ; page.next() recupere la suivante

        Raises:
            UpstreamError: Si OMDb renvoie une erreur
            ClassificationError: Si la reponse n'est pas un objet JSON
        """
        merged = self._options.merge(options)
        params = search_params(request, merged.api_key or "", page)

        logger.debug(f"OMDb search: {request.name} (page {page})")
        payload = await self._request(params, merged)

        match classify_collection(payload):
            case PayloadKind.ERROR:
                raise UpstreamError(f"{error_message(payload)}: {request.name}")
            case PayloadKind.UNKNOWN if not isinstance(payload, Mapping):
                raise ClassificationError(
                    f"search for '{request.name}' did not return a result page"
                )
            case _:
                return build_search_page(
                    payload, page, merged, request, searcher=self._next_page
                )

    async def _next_page(
        self, request: SearchRequest, page: int, options: MovieOptions
    ) -> SearchResultPage:
        return await self.search(request, page=page, options=options)

    async def episodes(self, show: TVShow) -> tuple[Episode, ...]:
        """Recupere les episodes d'une serie (voir TVShow.episodes)."""
        return await show.episodes()

    async def close(self) -> None:
        """Ferme le transport s'il a ete cree par ce client."""
        if self._owns_transport:
            await self._transport.close()

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()


async def get(request: MovieRequest, options: MovieOptions) -> Movie:
    """
    Recupere un element unique avec un client ephemere.

    Une erreur de construction du client (cle API absente) est levee a
    l'attente de la coroutine, jamais a l'appel.
    """
    client = Client(options, transport=HttpxTransport(persistent=False))
    return await client.get(request)


async def search(
    request: SearchRequest, options: MovieOptions, page: int = 1
) -> SearchResultPage:
    """Recherche avec un client ephemere (voir Client.search)."""
    client = Client(options, transport=HttpxTransport(persistent=False))
    return await client.search(request, page=page)
