"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance des données.
Les implémentations (adaptateurs) fourniront les mécanismes de stockage concrets
(SQLite via SQLModel, en mémoire pour les tests, etc.).
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from src.core.entities.catalog import CatalogEntry
from src.core.entities.principal import Principal


class ICatalogRepository(ABC):
    """
    Interface de stockage des entrées de catalogue.

    Chaque opération est atomique pour une entrée ; aucune transaction
    multi-entrées n'est requise. Les horodatages sont gérés ici.
    """

    @abstractmethod
    def create(self, entry: CatalogEntry) -> CatalogEntry:
        """Enregistre une nouvelle entrée et retourne l'entrée avec son ID attribué."""
        ...

    @abstractmethod
    def get(self, entry_id: str) -> Optional[CatalogEntry]:
        """Récupère une entrée par son ID, ou None si absente."""
        ...

    @abstractmethod
    def list_all(self) -> list[CatalogEntry]:
        """Liste toutes les entrées, par ordre de création."""
        ...

    @abstractmethod
    def search_by_title(self, substring: str) -> list[CatalogEntry]:
        """
        Recherche par sous-chaîne du titre, insensible à la casse.

        Une sous-chaîne vide correspond à toutes les entrées.
        """
        ...

    @abstractmethod
    def update(self, entry_id: str, fields: dict[str, Any]) -> Optional[CatalogEntry]:
        """
        Fusionne les champs fournis dans l'entrée.

        Les champs absents du dictionnaire ne sont pas modifiés.
        Retourne l'entrée à jour, ou None si l'ID est inconnu.
        """
        ...

    @abstractmethod
    def delete(self, entry_id: str) -> Optional[CatalogEntry]:
        """Supprime une entrée et retourne son état antérieur, ou None si absente."""
        ...


class IPrincipalRepository(ABC):
    """Interface de stockage des comptes (collaborateur d'authentification)."""

    @abstractmethod
    def get_by_id(self, principal_id: str) -> Optional[Principal]:
        """Récupère un compte par son ID."""
        ...

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[Principal]:
        """Récupère un compte par son email (comparaison en minuscules)."""
        ...

    @abstractmethod
    def save(self, principal: Principal) -> Principal:
        """Enregistre un nouveau compte."""
        ...
