"""
Fixtures pytest partagees pour les tests ShortCat.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test avec chemins temporaires
- Engine / session SQLite temporaires
- Stockage de fichiers dans un repertoire temporaire
- Fabrique de parties multipart (FilePart)
"""

import io
from pathlib import Path
from typing import Callable

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient
from sqlmodel import Session

from src.adapters.asset_store import LocalAssetStore
from src.config import Settings
from src.container import Container
from src.core.value_objects.upload import FilePart
from src.infrastructure.persistence.database import create_db_engine, init_db
from src.infrastructure.persistence.repositories import SQLModelCatalogRepository
from src.web.app import create_app

# Contenus factices (seuls les en-tetes ressemblent aux vrais formats)
JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"fake jpeg" * 10
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"fake png" * 10
MP4_BYTES = b"\x00\x00\x00\x18ftypmp42" + b"fake mp4" * 50


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler base, uploads et logs.
    """
    return Settings(
        upload_dir=tmp_path / "uploads",
        database_url=f"sqlite:///{tmp_path}/test.db",
        jwt_secret="test-secret",
        max_files_per_field=3,
        log_file=tmp_path / "test.log",
    )


@pytest.fixture
def engine(test_settings: Settings):
    """Engine SQLite temporaire avec tables creees."""
    engine = create_db_engine(test_settings.database_url)
    resource = init_db(engine)
    next(resource)
    yield engine
    resource.close()


@pytest.fixture
def session(engine):
    """Session SQLModel sur la base temporaire."""
    with Session(engine) as session:
        yield session


@pytest.fixture
def catalog_repository(session) -> SQLModelCatalogRepository:
    """Repository du catalogue sur la base temporaire."""
    return SQLModelCatalogRepository(session)


@pytest.fixture
def asset_store(test_settings: Settings) -> LocalAssetStore:
    """Stockage de fichiers dans le repertoire temporaire."""
    return LocalAssetStore(test_settings.upload_dir)


@pytest.fixture
def make_part() -> Callable[..., FilePart]:
    """
    Fabrique de FilePart.

    Par defaut : une miniature JPEG. Exemple :
        make_part("video", "video/mp4", "clip.mp4", MP4_BYTES)
    """

    def factory(
        field_name: str = "thumbnail",
        content_type: str = "image/jpeg",
        filename: str = "thumb.jpg",
        data: bytes = JPEG_BYTES,
    ) -> FilePart:
        return FilePart(
            field_name=field_name,
            content_type=content_type,
            filename=filename,
            stream=io.BytesIO(data),
        )

    return factory


@pytest.fixture
def thumbnail_part(make_part) -> FilePart:
    """Miniature JPEG valide."""
    return make_part()


@pytest.fixture
def video_part(make_part) -> FilePart:
    """Video MP4 valide."""
    return make_part("video", "video/mp4", "clip.mp4", MP4_BYTES)


@pytest.fixture
def container(test_settings: Settings):
    """Container DI pointant sur la configuration de test."""
    container = Container()
    container.config.override(providers.Object(test_settings))
    yield container
    container.config.reset_override()


@pytest.fixture
def client(container):
    """Client HTTP sur une application neuve (lifespan execute)."""
    with TestClient(create_app(container)) as client:
        yield client
