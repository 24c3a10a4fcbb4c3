"""
Normalisation des champs OMDb vers le schema du domaine.

OMDb renvoie des objets plats aux cles en CamelCase et aux valeurs
presque toutes textuelles. Ce module traduit chaque cle connue via une
table explicite et applique les regles de conversion :

- Year : plage d'annees ("2015-2019", "2015–") conservee telle quelle,
  sinon entier obligatoire (ParseError si invalide)
- imdbRating : flottant, 0.0 si invalide
- Released / DVD : dates, champ absent si invalide (pas d'erreur)
- Ratings : liste de Rating
- cles inconnues : recopiees dans extras avec la cle en minuscules
"""

import math
import re
from datetime import date, datetime
from typing import Any, Mapping, Optional

from dateutil import parser as date_parser

from imdb_api.core.entities import Rating
from imdb_api.core.errors import ParseError

# Plage d'annees avec tiret ou demi-cadratin, fin optionnelle
YEAR_RANGE_PATTERN = re.compile(r"\d{4}[-–](?:\d{4})?")

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

# Date par defaut pour completer les dates partielles ("2006" -> 1er janvier)
_DATE_DEFAULT = datetime(1970, 1, 1)

# Cles OMDb recopiees sans conversion
RENAME_TABLE: dict[str, str] = {
    "Title": "title",
    "Rated": "rated",
    "Runtime": "runtime",
    "Genre": "genres",
    "Director": "director",
    "Writer": "writer",
    "Actors": "actors",
    "Plot": "plot",
    "Language": "languages",
    "Country": "country",
    "Awards": "awards",
    "Poster": "poster",
    "Metascore": "metascore",
    "imdbVotes": "votes",
    "imdbID": "imdb_id",
    "Type": "type",
    "BoxOffice": "box_office",
    "Production": "production",
    "Website": "website",
    "seriesID": "series_id",
    # Valeurs brutes interpretees par les builders de variantes
    "totalSeasons": "total_seasons",
    "Season": "season",
    "Episode": "episode",
}

# Cles propres a une variante, renvoyees dans extras si la variante ne les consomme pas
VARIANT_KEYS: dict[str, str] = {
    "total_seasons": "totalseasons",
    "season": "season",
    "episode": "episode",
    "series_id": "seriesid",
}

# Indicateur de succes OMDb, sans equivalent dans le domaine
_DROPPED_KEYS = frozenset({"Response"})


def parse_int(value: Any) -> Optional[int]:
    """
    Extrait l'entier en tete d'une valeur ("2015-2019" -> 2015, "N/A" -> None).

    Args:
        value: Valeur brute (texte ou nombre JSON)

    Returns:
        L'entier lu, ou None si la valeur ne commence pas par un entier
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return None if math.isnan(value) or math.isinf(value) else int(value)
    if not isinstance(value, str):
        return None
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else None


def parse_float(value: Any) -> float:
    """Extrait le flottant en tete d'une valeur, 0.0 si absent ou NaN."""
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        result = float(value)
    elif isinstance(value, str):
        match = _LEADING_FLOAT.match(value)
        if not match:
            return 0.0
        result = float(match.group(1))
    else:
        return 0.0
    return 0.0 if math.isnan(result) else result


def parse_date(value: Any) -> Optional[date]:
    """
    Parse une date OMDb ("14 Jul 2006") de facon permissive.

    Returns:
        La date, ou None si la valeur est absente, "N/A" ou illisible
    """
    if not isinstance(value, str) or not value.strip() or value == "N/A":
        return None
    try:
        return date_parser.parse(value, default=_DATE_DEFAULT).date()
    except (ValueError, OverflowError):
        return None


def normalize_year(value: Any) -> dict[str, Any]:
    """
    Normalise le champ Year.

    Une plage d'annees est conservee uniquement dans year_data.
    Toute autre valeur doit commencer par un entier.

    Raises:
        ParseError: Si l'annee n'est ni une plage ni un entier
    """
    raw = "" if value is None else str(value)
    if YEAR_RANGE_PATTERN.search(raw):
        return {"year_data": raw}
    year = parse_int(value)
    if year is None:
        raise ParseError("invalid year")
    return {"year": year, "year_data": raw}


def normalize_ratings(value: Any) -> tuple[Rating, ...]:
    """Copie la liste Ratings element par element."""
    if not isinstance(value, list):
        return ()
    return tuple(
        Rating(source=str(item.get("Source", "")), value=str(item.get("Value", "")))
        for item in value
        if isinstance(item, Mapping)
    )


def normalize(payload: Mapping[str, Any]) -> dict[str, Any]:
    """
    Transforme un objet OMDb en dictionnaire de champs du domaine.

    Fonction pure : le payload n'est pas modifie et deux appels sur le
    meme payload renvoient des resultats egaux et independants.

    Args:
        payload: Objet JSON OMDb (film, serie, episode, jeu)

    Returns:
        Champs du domaine, prets pour les builders

    Raises:
        ParseError: Si Year est invalide
    """
    fields: dict[str, Any] = {}
    extras: dict[str, Any] = {}

    for key, value in payload.items():
        if key in _DROPPED_KEYS:
            continue
        if key == "Year":
            fields.update(normalize_year(value))
        elif key == "imdbRating":
            fields["rating"] = parse_float(value)
        elif key == "Released":
            released = parse_date(value)
            if released is not None:
                fields["released"] = released
        elif key == "DVD":
            dvd_release = parse_date(value)
            if dvd_release is not None:
                fields["dvd_release"] = dvd_release
        elif key == "Ratings":
            fields["ratings"] = normalize_ratings(value)
        elif key in RENAME_TABLE:
            fields[RENAME_TABLE[key]] = value
        else:
            extras[key.lower()] = value

    fields["extras"] = extras
    return fields


def split_variant_fields(
    fields: dict[str, Any], consumed: frozenset[str] = frozenset()
) -> tuple[dict[str, Any], dict[str, Any]]:
    """
    Separe les champs propres aux variantes des champs communs.

    Les champs de variante non consommes par le builder appelant sont
    renvoyes dans extras sous leur nom OMDb en minuscules.

    Args:
        fields: Resultat de normalize()
        consumed: Champs de variante utilises par le builder

    Returns:
        (champs communs, champs de variante consommes)
    """
    common = dict(fields)
    extras = dict(common.get("extras", {}))
    variant: dict[str, Any] = {}
    for name, upstream_name in VARIANT_KEYS.items():
        if name not in common:
            continue
        value = common.pop(name)
        if name in consumed:
            variant[name] = value
        else:
            extras[upstream_name] = value
    common["extras"] = extras
    return common, variant
