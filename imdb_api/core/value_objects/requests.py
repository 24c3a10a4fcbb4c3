"""
Objets valeur pour les requetes OMDb.

Les options sont superposees : les options du Client servent de base et
les options passees a chaque appel les surchargent champ par champ.
"""

from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Optional


class RequestType(str, Enum):
    """Type de media recherche.

    Valeurs:
        MOVIE: Film
        SERIES: Serie TV
        EPISODE: Episode de serie
        GAME: Jeu video
    """

    MOVIE = "movie"
    SERIES = "series"
    EPISODE = "episode"
    GAME = "game"


@dataclass(frozen=True)
class MovieOptions:
    """
    Options modifiant les appels a OMDb.

    Peuvent etre passees au constructeur de Client, a get/search, ou a
    chaque methode du Client pour surcharger les options de base.

    Attributs:
        api_key: Cle API OMDb, obligatoire pour tout appel
        timeout: Delai maximum par requete HTTP, en secondes
    """

    api_key: Optional[str] = None
    timeout: Optional[float] = None

    def merge(self, overrides: Optional["MovieOptions"] = None) -> "MovieOptions":
        """
        Fusionne des options de surcharge par-dessus celles-ci.

        Fusion superficielle : chaque champ renseigne (non None) dans
        overrides remplace le champ correspondant. L'instance courante
        n'est jamais modifiee.

        Args:
            overrides: Options de l'appel, ou None

        Returns:
            Nouvelle instance de MovieOptions
        """
        if overrides is None:
            return replace(self)
        changes = {
            f.name: getattr(overrides, f.name)
            for f in fields(overrides)
            if getattr(overrides, f.name) is not None
        }
        return replace(self, **changes)


@dataclass(frozen=True)
class MovieRequest:
    """
    Requete explicite pour un element unique. Ne fait pas de recherche.

    Un des champs name ou id DOIT etre renseigne. Si les deux le sont,
    le titre est utilise. year permet de departager deux films du meme nom.

    Attributs:
        name: Titre du media (en anglais uniquement cote OMDb)
        id: Identifiant IMDb (ex: "tt0090190")
        year: Annee de sortie
        short_plot: True pour demander un resume court (defaut: resume complet)
    """

    name: Optional[str] = None
    id: Optional[str] = None
    year: Optional[int] = None
    short_plot: bool = False

    @property
    def query_term(self) -> Optional[str]:
        """Terme effectivement envoye (titre en priorite, sinon id)."""
        return self.name or self.id


@dataclass(frozen=True)
class SearchRequest:
    """
    Recherche floue renvoyant plusieurs resultats.

    Attributs:
        name: Titre recherche (obligatoire)
        type: Type de media recherche
        year: Annee de sortie
    """

    name: str
    type: Optional[RequestType] = None
    year: Optional[int] = None
