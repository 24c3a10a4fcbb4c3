"""
Fixtures pytest partagees pour les tests imdb-api.

Ce module contient les fixtures communes utilisees dans les tests:
- Options de test avec une cle API factice
- Mock de ITransport renvoyant des reponses OMDb preparees
"""

from typing import Any, Callable
from unittest.mock import AsyncMock

import pytest

from imdb_api.core.ports import ITransport
from imdb_api.core.value_objects import MovieOptions
from tests.fixtures.omdb_responses import TEST_API_KEY


@pytest.fixture
def options() -> MovieOptions:
    """Options de base avec une cle API factice."""
    return MovieOptions(api_key=TEST_API_KEY, timeout=5.0)


@pytest.fixture
def mock_transport() -> AsyncMock:
    """
    Mock de ITransport pour les tests.

    Les reponses doivent etre configurees dans chaque test via
    request.return_value ou request.side_effect.
    """
    transport = AsyncMock(spec=ITransport)
    transport.request = AsyncMock()
    transport.close = AsyncMock()
    return transport


@pytest.fixture
def transport_responding() -> Callable[[Callable[[dict[str, str]], Any]], AsyncMock]:
    """
    Fabrique un mock de ITransport repondant en fonction des parametres.

    Usage:
        transport = transport_responding(lambda params: {...})
    """

    def factory(responder: Callable[[dict[str, str]], Any]) -> AsyncMock:
        transport = AsyncMock(spec=ITransport)

        async def request(url, params, headers=None, timeout=None):
            return responder(dict(params))

        transport.request = AsyncMock(side_effect=request)
        transport.close = AsyncMock()
        return transport

    return factory
