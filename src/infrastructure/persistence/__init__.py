"""
Module de persistance SQLite pour ShortCat.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Creation de l'engine, sessions, initialisation des tables
- models.py : Modeles SQLModel representant les tables de la base de donnees

Les modeles ici sont des adapters de persistance, distincts des entites de domaine
(dataclass dans core/entities/). La conversion entre les deux se fait dans les
repositories.

Usage:
    from src.infrastructure.persistence import create_db_engine, init_db

    engine = create_db_engine("sqlite:///shortcat.db")
    resource = init_db(engine)
    next(resource)  # Cree les tables si necessaire
"""

from src.infrastructure.persistence.database import (
    create_db_engine,
    init_db,
)
from src.infrastructure.persistence.models import CatalogEntryModel, PrincipalModel

__all__ = [
    "create_db_engine",
    "init_db",
    "CatalogEntryModel",
    "PrincipalModel",
]
