"""
Objets valeur immutables decrivant les requetes vers OMDb.

Exports :
- MovieOptions : Options de requete (cle API, timeout), fusionnables par appel
- MovieRequest : Requete d'un element unique (par titre ou par id)
- SearchRequest : Requete de recherche floue, conservee pour la pagination
- RequestType : Type de media recherche (movie, series, episode, game)
"""

from imdb_api.core.value_objects.requests import (
    MovieOptions,
    MovieRequest,
    RequestType,
    SearchRequest,
)

__all__ = [
    "MovieOptions",
    "MovieRequest",
    "RequestType",
    "SearchRequest",
]
