"""
Enregistrements metier construits depuis les reponses OMDb.

Exports:
- Movie: Enregistrement de base (attributs communs)
- Episode, TVShow, Game: Variantes de Movie
- MediaKind: Etiquette de variante
- Rating: Note d'une source externe
- SearchResult, SearchResultPage: Resultats de recherche pagines
"""

from imdb_api.core.entities.media import (
    Episode,
    EpisodeCache,
    Game,
    MediaKind,
    Movie,
    Rating,
    SearchResult,
    SearchResultPage,
    TVShow,
)

__all__ = [
    "Episode",
    "EpisodeCache",
    "Game",
    "MediaKind",
    "Movie",
    "Rating",
    "SearchResult",
    "SearchResultPage",
    "TVShow",
]
