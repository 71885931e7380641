"""
Configuration de la base de donnees SQLite pour ShortCat.

Ce module fournit :
- Creation de l'engine avec configuration adaptee au multi-thread
- Fonction d'initialisation des tables

L'URL de la base est injectee par le container (Settings.database_url),
jamais lue directement depuis l'environnement.
"""

from collections.abc import Generator
from pathlib import Path

from loguru import logger
from sqlalchemy import Engine
from sqlmodel import SQLModel, create_engine


def create_db_engine(database_url: str) -> Engine:
    """
    Cree l'engine SQLAlchemy pour l'URL donnee.

    Cree le repertoire parent si l'URL designe un fichier SQLite.
    """
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
        if database_url.startswith("sqlite:///") and not database_url.startswith(
            "sqlite:///:memory:"
        ):
            db_path = Path(database_url.replace("sqlite:///", "", 1))
            db_path.parent.mkdir(exist_ok=True, parents=True)

    return create_engine(database_url, echo=False, connect_args=connect_args)


def init_db(engine: Engine) -> Generator[Engine, None, None]:
    """
    Initialise la base de donnees en creant toutes les tables.

    Ressource du container : les tables sont creees a l'initialisation,
    l'engine est libere a l'arret (container.shutdown_resources()).
    """
    # Import des modeles pour enregistrer leurs metadonnees
    # L'import est fait ici pour eviter les imports circulaires
    from src.infrastructure.persistence import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    logger.debug("Tables initialisees", url=str(engine.url))
    try:
        yield engine
    finally:
        engine.dispose()
