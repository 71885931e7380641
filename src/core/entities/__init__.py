"""
Entités métier du catalogue.

Exports :
- CatalogEntry : Métadonnées d'une courte vidéo et références de ses fichiers
- Principal : Compte authentifié (propriétaire des entrées)
- Role : Rôle d'un compte
"""

from src.core.entities.catalog import CatalogEntry
from src.core.entities.principal import Principal, Role

__all__ = [
    "CatalogEntry",
    "Principal",
    "Role",
]
