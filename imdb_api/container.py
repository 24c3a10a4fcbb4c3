"""
Container d'injection de dependances via dependency-injector.

Fournit la configuration, le transport HTTP partage et le client OMDb
a l'interface CLI.
"""

from dependency_injector import containers, providers

from .adapters.api.client import Client
from .adapters.api.transport import HttpxTransport
from .config import Settings


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        client = container.client()
        movie = await client.get(MovieRequest(name="Alien"))
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Transport - Singleton pour partager le connection pooling
    transport = providers.Singleton(
        HttpxTransport,
        timeout=config.provided.timeout,
    )

    # Client OMDb - Factory, options de base depuis la config
    client = providers.Factory(
        Client,
        options=config.provided.to_options.call(),
        transport=transport,
        base_url=config.provided.base_url,
    )
