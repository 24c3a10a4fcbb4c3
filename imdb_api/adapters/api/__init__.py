"""
Adaptateur OMDb.

Ce module fournit :
- normalizer : traduction des champs OMDb vers le domaine
- classifier : classification des reponses (erreur, film, serie...)
- builders : construction des enregistrements
- episodes : agregation parallele des episodes par saison
- transport : transport HTTP httpx (implemente ITransport)
- client : Client OMDb et fonctions get/search ponctuelles
"""

from imdb_api.adapters.api.client import OMDB_URL, Client, get, search
from imdb_api.adapters.api.transport import HttpxTransport

__all__ = [
    "OMDB_URL",
    "Client",
    "HttpxTransport",
    "get",
    "search",
]
