"""
Tests unitaires pour le stockage local des fichiers.

Ce module teste le nommage unique, la conservation des extensions,
la lecture des references et la gestion des erreurs d'ecriture.
"""

import io
import re
import threading
from unittest.mock import patch

import pytest

from src.adapters.asset_store import LocalAssetStore
from src.core.exceptions import AssetNotFound, StoreUnavailable


# ====================
# Tests store
# ====================


class TestStore:
    """Tests d'ecriture."""

    def test_store_returns_resolvable_reference(self, asset_store):
        """Le contenu relu est identique au contenu ecrit."""
        ref = asset_store.store(io.BytesIO(b"hello video"), "clip.mp4", "video/mp4")
        with asset_store.resolve(ref) as stream:
            assert stream.read() == b"hello video"

    def test_reference_is_random_token_plus_extension(self, asset_store):
        """Nom = 32 hex + extension originale en minuscules."""
        ref = asset_store.store(io.BytesIO(b"x"), "My Holiday.JPG", "image/jpeg")
        assert re.fullmatch(r"[0-9a-f]{32}\.jpg", ref)

    def test_extension_guessed_from_content_type(self, asset_store):
        """Sans extension, l'extension est deduite du type MIME."""
        ref = asset_store.store(io.BytesIO(b"x"), "thumbnail", "image/png")
        assert ref.endswith(".png")

    def test_suspicious_extension_dropped(self, asset_store):
        """Une extension exotique n'est pas recopiee telle quelle."""
        ref = asset_store.store(io.BytesIO(b"x"), "evil.p h p", "application/x-unknown")
        assert re.fullmatch(r"[0-9a-f]{32}", ref)

    def test_same_name_never_collides(self, asset_store):
        """Deux envois du meme nom produisent deux fichiers distincts."""
        first = asset_store.store(io.BytesIO(b"one"), "clip.mp4", "video/mp4")
        second = asset_store.store(io.BytesIO(b"two"), "clip.mp4", "video/mp4")
        assert first != second
        assert asset_store.resolve(first).read() == b"one"
        assert asset_store.resolve(second).read() == b"two"

    def test_concurrent_writers_get_unique_names(self, asset_store):
        """Des ecritures concurrentes ne s'ecrasent jamais."""
        refs: list[str] = []
        lock = threading.Lock()

        def write(i: int) -> None:
            ref = asset_store.store(io.BytesIO(f"payload-{i}".encode()), "a.mp4", "video/mp4")
            with lock:
                refs.append(ref)

        threads = [threading.Thread(target=write, args=(i,)) for i in range(20)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(set(refs)) == 20
        assert len(list(asset_store.list_references())) == 20

    def test_existing_name_is_not_overwritten(self, asset_store):
        """Si le nom tire existe deja, un autre nom est tire."""
        existing = asset_store.store(io.BytesIO(b"original"), "a.jpg", "image/jpeg")
        token = existing.removesuffix(".jpg")

        class _FakeUUID:
            def __init__(self, hex_value):
                self.hex = hex_value

        with patch(
            "src.adapters.asset_store.uuid.uuid4",
            side_effect=[_FakeUUID(token), _FakeUUID("f" * 32)],
        ):
            ref = asset_store.store(io.BytesIO(b"new"), "b.jpg", "image/jpeg")

        assert ref == "f" * 32 + ".jpg"
        assert asset_store.resolve(existing).read() == b"original"

    def test_creates_root_dir(self, tmp_path):
        store = LocalAssetStore(tmp_path / "nested" / "uploads")
        store.store(io.BytesIO(b"x"), "a.jpg", "image/jpeg")
        assert (tmp_path / "nested" / "uploads").is_dir()

    def test_write_error_raises_store_unavailable(self, asset_store):
        """Une erreur disque devient StoreUnavailable, sans fichier partiel."""
        with patch(
            "src.adapters.asset_store.shutil.copyfileobj",
            side_effect=OSError(28, "No space left on device"),
        ):
            with pytest.raises(StoreUnavailable):
                asset_store.store(io.BytesIO(b"x"), "a.mp4", "video/mp4")
        assert list(asset_store.list_references()) == []

    def test_unwritable_root_raises_store_unavailable(self, tmp_path):
        """Un repertoire racine impossible a creer leve StoreUnavailable."""
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        store = LocalAssetStore(blocker / "uploads")
        with pytest.raises(StoreUnavailable):
            store.store(io.BytesIO(b"x"), "a.jpg", "image/jpeg")


# ====================
# Tests lecture / suppression
# ====================


class TestReadAndDelete:
    """Tests de resolve, exists, delete et list_references."""

    def test_resolve_unknown_reference(self, asset_store):
        with pytest.raises(AssetNotFound):
            asset_store.resolve("0" * 32 + ".jpg")

    @pytest.mark.parametrize("ref", ["../secret.txt", "a/b.jpg", ".hidden", ""])
    def test_resolve_rejects_path_escape(self, asset_store, ref):
        """Seuls les noms simples sont acceptes."""
        with pytest.raises(AssetNotFound):
            asset_store.resolve(ref)

    def test_exists_and_delete(self, asset_store):
        ref = asset_store.store(io.BytesIO(b"x"), "a.jpg", "image/jpeg")
        assert asset_store.exists(ref)
        assert asset_store.delete(ref) is True
        assert not asset_store.exists(ref)
        assert asset_store.delete(ref) is False

    def test_list_references_ignores_hidden_files(self, asset_store, test_settings):
        ref = asset_store.store(io.BytesIO(b"x"), "a.jpg", "image/jpeg")
        (test_settings.upload_dir / ".tmp_partial").write_bytes(b"partial")
        assert list(asset_store.list_references()) == [ref]

    def test_list_references_missing_root(self, tmp_path):
        store = LocalAssetStore(tmp_path / "absent")
        assert list(store.list_references()) == []
