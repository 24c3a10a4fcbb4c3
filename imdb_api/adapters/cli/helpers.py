"""
Utilitaires partages pour les commandes CLI.

Ce module fournit :
- console : instance Rich Console partagee
- with_container : decorateur injectant un container et fermant le transport
- handle_errors : context manager convertissant les erreurs en code de sortie 1
"""

from contextlib import contextmanager
from functools import wraps

import httpx
import typer
from rich.console import Console

from imdb_api.container import Container
from imdb_api.core.errors import ImdbError

console = Console()


def with_container():
    """
    Decorateur qui injecte un container en premier argument.

    Le transport partage est ferme a la fin de la commande.

    Usage:
        @with_container()
        async def my_command(container, ...):
            client = container.client()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            try:
                return await func(container, *args, **kwargs)
            finally:
                await container.transport().close()
        return wrapper
    return decorator


@contextmanager
def handle_errors():
    """Affiche les erreurs OMDb et reseau en rouge et sort avec le code 1."""
    try:
        yield
    except ImdbError as e:
        console.print(f"[red]Erreur :[/red] {e.message}")
        raise typer.Exit(code=1) from e
    except httpx.HTTPError as e:
        console.print(f"[red]Erreur reseau :[/red] {e}")
        raise typer.Exit(code=1) from e
