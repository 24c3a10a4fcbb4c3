"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Ports transport : Contrat pour l'acces HTTP
- ITransport : Requete GET renvoyant du JSON deja decode
"""

from imdb_api.core.ports.transport import ITransport

__all__ = [
    "ITransport",
]
