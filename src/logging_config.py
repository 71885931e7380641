"""
Configuration du logging de ShortCat via loguru.

Chaque enregistrement porte un champ `request_id` (contexte loguru) :
"-" hors requete HTTP, l'identifiant de la requete sinon. La console reste
lisible ; le fichier JSON tourne selon les Settings.
"""

import sys
import uuid
from typing import Optional

from loguru import logger

from .config import Settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<magenta>{extra[request_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

# Hors requete HTTP (CLI, demarrage, balayage)
NO_REQUEST = "-"

MAX_REQUEST_ID_LENGTH = 64


def configure_logging(settings: Settings) -> None:
    """Installe les sinks console et fichier decrits par les Settings.

    Appelee au demarrage de la CLI et dans le lifespan de l'application web.
    """
    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.configure(
        handlers=[
            {
                "sink": sys.stderr,
                "level": settings.log_level,
                "format": CONSOLE_FORMAT,
                "colorize": True,
            },
            {
                # Tous niveaux, details d'upload en DEBUG
                "sink": settings.log_file,
                "level": "DEBUG",
                "format": "{message}",
                "serialize": True,
                "rotation": settings.log_rotation_size,
                "retention": settings.log_retention_count,
                "compression": "zip",
                "enqueue": True,
            },
        ],
        extra={"request_id": NO_REQUEST},
    )
    logger.debug(f"Logging configure ({settings.log_file}, niveau {settings.log_level})")


def new_request_id(incoming: Optional[str] = None) -> str:
    """Reprend l'identifiant fourni par le client s'il est exploitable, sinon en genere un."""
    if incoming:
        incoming = incoming.strip()
        if incoming and len(incoming) <= MAX_REQUEST_ID_LENGTH and incoming.isprintable():
            return incoming
    return uuid.uuid4().hex[:12]
