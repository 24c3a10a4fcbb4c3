"""
Configuration du logging de imdb-api via loguru.

Deux sorties :
- stderr, coloree, au niveau choisi par l'utilisateur
- fichier JSON avec rotation, toujours en DEBUG pour garder la trace des requetes OMDb

Un patcher global masque la cle API si elle apparait dans un message
(URL complete copiee dans une exception httpx par exemple).
"""

import re
import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> "
    "<level>{level: <8}</level> "
    "<cyan>{name}</cyan> | "
    "<level>{message}</level>"
)

_API_KEY_IN_TEXT = re.compile(r"(apikey=)[^&\s'\"]+", re.IGNORECASE)


def mask_api_key(record: dict) -> None:
    """Remplace la valeur de apikey=... par des etoiles dans le message."""
    record["message"] = _API_KEY_IN_TEXT.sub(r"\1***", record["message"])


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/imdb-api.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Installe les handlers loguru de l'application.

    Args :
        log_level : Niveau minimum affiche sur stderr
        log_file : Fichier JSON, son repertoire est cree si besoin
        rotation_size : Taille declenchant la rotation (ex: "10 MB")
        retention_count : Nombre de fichiers archives conserves
    """
    logger.remove()
    logger.configure(patcher=mask_api_key)

    logger.add(sys.stderr, level=log_level, format=CONSOLE_FORMAT, colorize=True)

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug(f"Logs OMDb dans {log_file} (niveau console {log_level})")
