"""
Transport HTTP vers OMDb base sur httpx.

Implemente ITransport : un GET avec parametres, headers et timeout,
renvoyant le JSON decode. Aucun retry : les erreurs httpx
(HTTPStatusError, TimeoutException, ConnectError) remontent a l'appelant.
"""

from typing import Any, Mapping, Optional

import httpx
from loguru import logger

from imdb_api.core.errors import ImdbError
from imdb_api.core.ports import ITransport


class HttpxTransport(ITransport):
    """
    Transport httpx asynchrone.

    En mode persistant (defaut), un client unique est cree a la premiere
    requete pour beneficier du connection pooling, et doit etre ferme par
    close(), apres quoi il refuse toute requete. En mode non persistant,
    chaque requete ouvre et ferme son propre client : utile pour les
    appels ponctuels sans cycle de vie.

    Attributes:
        DEFAULT_TIMEOUT: Timeout par requete quand l'appelant n'en fournit pas

    Example:
        transport = HttpxTransport()
        data = await transport.request(
            "https://www.omdbapi.com", {"apikey": "xxx", "t": "Alien", "r": "json"}
        )
        await transport.close()
    """

    DEFAULT_TIMEOUT = 10.0

    def __init__(
        self,
        timeout: Optional[float] = None,
        persistent: bool = True,
    ) -> None:
        """
        Initialise le transport.

        Args:
            timeout: Timeout par defaut en secondes (DEFAULT_TIMEOUT si None)
            persistent: Reutiliser un client unique entre les requetes
        """
        self._timeout = timeout if timeout is not None else self.DEFAULT_TIMEOUT
        self._persistent = persistent
        self._client: Optional[httpx.AsyncClient] = None
        self._closed = False

    def _new_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=httpx.Timeout(self._timeout))

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client persistant, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = self._new_client()
        return self._client

    async def request(
        self,
        url: str,
        params: Mapping[str, str],
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> Any:
        """
        Execute un GET et renvoie le JSON decode.

        Raises:
            httpx.HTTPStatusError: Statut HTTP non 2xx
            httpx.TimeoutException: Timeout depasse
            httpx.TransportError: Erreur reseau
            ImdbError: Si le transport a deja ete ferme
        """
        if self._closed:
            raise ImdbError("Transport is closed")
        request_timeout = (
            httpx.Timeout(timeout) if timeout is not None else httpx.USE_CLIENT_DEFAULT
        )
        logger.debug(f"GET {url} ({', '.join(k for k in params if k != 'apikey')})")

        if self._persistent:
            response = await self._get_client().get(
                url, params=dict(params), headers=headers, timeout=request_timeout
            )
            response.raise_for_status()
            return response.json()

        async with self._new_client() as client:
            response = await client.get(
                url, params=dict(params), headers=headers, timeout=request_timeout
            )
            response.raise_for_status()
            return response.json()

    async def close(self) -> None:
        """Ferme le client HTTP ; toute requete ulterieure est refusee."""
        self._closed = True
        if self._client:
            await self._client.aclose()
            self._client = None
