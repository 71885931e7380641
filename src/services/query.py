"""
Service de lecture du catalogue.

Simple relais vers le repository : seule la validation du format de l'ID
est ajoutee, avant tout acces a la base.
"""

from typing import Optional

from src.core.entities.catalog import CatalogEntry
from src.core.exceptions import NotFound
from src.core.ports.repositories import ICatalogRepository
from src.core.value_objects.identifiers import parse_identifier


class QueryService:
    """Operations de lecture (liste, detail, recherche par titre)."""

    def __init__(self, catalog_repository: ICatalogRepository) -> None:
        self._repo = catalog_repository

    def list_all(self) -> list[CatalogEntry]:
        """Liste toutes les entrees."""
        return self._repo.list_all()

    def get_by_id(self, entry_id: str) -> CatalogEntry:
        """
        Recupere une entree.

        Raises:
            InvalidIdentifier: ID mal forme (le repository n'est pas consulte)
            NotFound: ID bien forme mais inconnu
        """
        entry_id = parse_identifier(entry_id)
        entry = self._repo.get(entry_id)
        if entry is None:
            raise NotFound(f"Entree introuvable : {entry_id}")
        return entry

    def search_by_title(self, substring: str) -> list[CatalogEntry]:
        """Recherche par sous-chaine du titre, insensible a la casse."""
        return self._repo.search_by_title(substring)

    def list_entries(self, title: Optional[str] = None) -> list[CatalogEntry]:
        """Liste ou recherche selon la presence d'un filtre sur le titre."""
        if not title:
            return self.list_all()
        return self.search_by_title(title)
