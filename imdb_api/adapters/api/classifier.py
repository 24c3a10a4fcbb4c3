"""
Classification des reponses OMDb.

Chaque reponse est classee une seule fois, avant toute normalisation,
et le resultat est consomme par un match sur PayloadKind.
"""

from enum import Enum
from typing import Any, Mapping


class PayloadKind(Enum):
    """Forme d'une reponse OMDb."""

    ERROR = "error"
    MOVIE = "movie"
    GAME = "game"
    SERIES = "series"
    EPISODE = "episode"
    SEARCH = "search"
    SEASON = "season"
    UNKNOWN = "unknown"


_TYPE_TAGS: dict[str, PayloadKind] = {
    "movie": PayloadKind.MOVIE,
    "game": PayloadKind.GAME,
    "series": PayloadKind.SERIES,
    "episode": PayloadKind.EPISODE,
}


def is_error(payload: Any) -> bool:
    """OMDb signale un echec par Response="False" accompagne d'un champ Error."""
    if not isinstance(payload, Mapping):
        return False
    response = payload.get("Response", True)
    if isinstance(response, str):
        return response.strip().lower() == "false"
    return response is False


def error_message(payload: Mapping[str, Any]) -> str:
    """Message d'erreur OMDb d'une reponse classee ERROR."""
    return str(payload.get("Error", "Unknown error"))


def type_tag(payload: Any) -> Any:
    """Valeur brute du champ Type, None si absent."""
    if not isinstance(payload, Mapping):
        return None
    return payload.get("Type")


def classify(payload: Any) -> PayloadKind:
    """
    Classe la reponse d'une requete d'element unique.

    Ordre d'evaluation : erreur, puis movie, game, series, episode.

    Args:
        payload: JSON decode renvoye par le transport

    Returns:
        PayloadKind.UNKNOWN si le type ne correspond a aucune variante
    """
    if is_error(payload):
        return PayloadKind.ERROR
    return _TYPE_TAGS.get(type_tag(payload), PayloadKind.UNKNOWN)


def classify_collection(payload: Any) -> PayloadKind:
    """
    Classe la reponse d'une recherche ou d'une saison.

    L'erreur est testee en premier. Une reponse contenant Episodes est
    une saison, une reponse contenant Search une page de recherche.
    """
    if is_error(payload):
        return PayloadKind.ERROR
    if not isinstance(payload, Mapping):
        return PayloadKind.UNKNOWN
    if "Episodes" in payload:
        return PayloadKind.SEASON
    if "Search" in payload:
        return PayloadKind.SEARCH
    return PayloadKind.UNKNOWN
