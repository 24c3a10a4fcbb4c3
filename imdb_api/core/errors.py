"""
Erreurs du domaine imdb-api.

Toutes les erreurs derivent de ImdbError pour que l'appelant puisse les
attraper en un seul endroit. Les sous-classes heritent aussi de l'exception
standard la plus proche (ValueError, TypeError) pour rester compatibles
avec du code qui attrape ces dernieres.

Les erreurs reseau (httpx.HTTPStatusError, httpx.TimeoutException) ne sont
pas encapsulees : elles remontent telles quelles depuis le transport.
"""


class ImdbError(Exception):
    """
    Erreur de base de imdb-api.

    Attributes:
        message: Message lisible decrivant l'erreur
    """

    name = "imdb api error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(ImdbError, ValueError):
    """Entree appelant invalide (cle API absente, ni nom ni id fournis)."""


class ParseError(ImdbError, TypeError):
    """Champ numerique obligatoire impossible a parser (annee, saison, episode)."""


class UpstreamError(ImdbError):
    """Le service OMDb a signale une erreur (Response=False)."""


class ClassificationError(ImdbError):
    """La reponse porte un type qui ne correspond a aucun enregistrement connu."""
