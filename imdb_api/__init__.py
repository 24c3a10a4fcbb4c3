"""
imdb-api - Client asynchrone pour l'API OMDb.

Ce package recupere les metadonnees de films, series, episodes et jeux
depuis omdbapi.com et les expose sous forme d'enregistrements types.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (enregistrements, objets valeur, erreurs, ports)
- adapters/ : Couche infrastructure (client OMDb, transport httpx, CLI)

Usage:
    from imdb_api import Client, MovieOptions, MovieRequest

    async with Client(MovieOptions(api_key="xxxxxx", timeout=30)) as client:
        movie = await client.get(MovieRequest(name="The Toxic Avenger"))
        print(movie.title)
"""

from imdb_api.adapters.api.client import Client, get, search
from imdb_api.core.entities import (
    Episode,
    Game,
    MediaKind,
    Movie,
    Rating,
    SearchResult,
    SearchResultPage,
    TVShow,
)
from imdb_api.core.errors import (
    ClassificationError,
    ImdbError,
    ParseError,
    UpstreamError,
    ValidationError,
)
from imdb_api.core.value_objects import (
    MovieOptions,
    MovieRequest,
    RequestType,
    SearchRequest,
)

__version__ = "4.4.1"

__all__ = [
    "Client",
    "get",
    "search",
    "Episode",
    "Game",
    "MediaKind",
    "Movie",
    "Rating",
    "SearchResult",
    "SearchResultPage",
    "TVShow",
    "ClassificationError",
    "ImdbError",
    "ParseError",
    "UpstreamError",
    "ValidationError",
    "MovieOptions",
    "MovieRequest",
    "RequestType",
    "SearchRequest",
]
