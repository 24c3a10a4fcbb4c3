"""
Interface port pour le transport HTTP.

Le domaine n'a besoin que d'une operation : un GET avec parametres de
requete, headers et timeout, renvoyant le corps JSON decode.
L'implementation concrete (httpx) vit dans adapters/api/transport.py.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional


class ITransport(ABC):
    """
    Interface de transport vers l'API OMDb.

    Les implementations doivent lever une exception sur erreur reseau,
    statut HTTP non 2xx ou depassement du timeout. Aucun retry.
    """

    @abstractmethod
    async def request(
        self,
        url: str,
        params: Mapping[str, str],
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> Any:
        """
        Execute une requete GET et renvoie le JSON decode.

        Args :
            url : URL de base du service
            params : Parametres de la query string
            headers : Headers HTTP additionnels
            timeout : Delai maximum en secondes (None = defaut du transport)

        Retourne :
            Corps de la reponse decode depuis JSON
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Libere les ressources du transport."""
        ...
