"""
Interface ligne de commande (Typer + Rich).

Commandes :
- get : recupere un film, une serie, un episode ou un jeu
- search : recherche paginee
- episodes : liste les episodes d'une serie
"""

from imdb_api.adapters.cli.commands import episodes, get, search

__all__ = [
    "episodes",
    "get",
    "search",
]
