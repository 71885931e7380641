"""Tests unitaires pour QueryService."""

from unittest.mock import Mock

import pytest

from src.core.entities.catalog import CatalogEntry
from src.core.exceptions import InvalidIdentifier, NotFound
from src.core.ports.repositories import ICatalogRepository
from src.services.query import QueryService

UNKNOWN_ID = "12345678-1234-4678-9234-567812345678"


def _entry(title=None) -> CatalogEntry:
    return CatalogEntry(
        title=title,
        thumbnail_refs=["t.jpg"],
        video_refs=["v.mp4"],
        owner_id="u1",
    )


@pytest.fixture
def service(catalog_repository) -> QueryService:
    return QueryService(catalog_repository)


class TestGetById:
    """Tests de lecture par ID."""

    def test_found(self, service, catalog_repository):
        created = catalog_repository.create(_entry("Sunset"))
        entry = service.get_by_id(created.id)
        assert entry.id == created.id
        assert entry.title == "Sunset"

    def test_unknown_id(self, service):
        with pytest.raises(NotFound):
            service.get_by_id(UNKNOWN_ID)

    def test_malformed_id_never_reaches_repository(self):
        """Un ID mal forme est refuse sans consulter le repository."""
        repo = Mock(spec=ICatalogRepository)
        service = QueryService(repo)

        with pytest.raises(InvalidIdentifier):
            service.get_by_id("not-a-valid-id")
        repo.get.assert_not_called()


class TestListAndSearch:
    """Tests de liste et de recherche par titre."""

    @pytest.fixture
    def populated(self, catalog_repository):
        for title in ("Sunset", "Sunset Clip", "Sunrise", None):
            catalog_repository.create(_entry(title))
        return catalog_repository

    def test_list_all_empty(self, service):
        assert service.list_all() == []

    def test_list_all(self, service, populated):
        assert len(service.list_all()) == 4

    def test_search_case_insensitive(self, service, populated):
        titles = {e.title for e in service.search_by_title("sunset")}
        assert titles == {"Sunset", "Sunset Clip"}

    def test_search_substring(self, service, populated):
        titles = {e.title for e in service.search_by_title("SUN")}
        assert titles == {"Sunset", "Sunset Clip", "Sunrise"}

    def test_search_no_match(self, service, populated):
        assert service.search_by_title("moon") == []

    def test_search_wildcards_are_literal(self, service, populated):
        """Les caracteres % et _ ne sont pas des jokers."""
        assert service.search_by_title("%") == []
        assert service.search_by_title("_") == []

    def test_list_entries_dispatch(self, service, populated):
        assert len(service.list_entries()) == 4
        assert len(service.list_entries("")) == 4
        assert [e.title for e in service.list_entries("rise")] == ["Sunrise"]
