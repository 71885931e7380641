"""
Adaptateur de stockage des fichiers envoyés sur le système de fichiers local.

Implementation concrete de IAssetStore. Chaque fichier est écrit dans le
répertoire d'upload sous un nom aléatoire (UUID4 hex) suivi de l'extension
d'origine ; le répertoire est servi tel quel en statique par l'application web.
"""

import mimetypes
import re
import shutil
import uuid
from pathlib import Path
from typing import BinaryIO, Iterator

from loguru import logger

from src.core.exceptions import AssetNotFound, StoreUnavailable
from src.core.ports.asset_store import IAssetStore

# Taille des blocs de copie (1 MB)
COPY_CHUNK_SIZE: int = 1024 * 1024

# Extensions conservees : point + 1 a 10 caracteres alphanumeriques
_EXTENSION_PATTERN = re.compile(r"^\.[a-z0-9]{1,10}$")

# Tirages supplementaires si un nom genere existe deja
_MAX_NAME_ATTEMPTS = 3


class LocalAssetStore(IAssetStore):
    """
    Implementation de IAssetStore pour le système de fichiers réel.

    Les écritures utilisent la création exclusive : un fichier existant
    n'est jamais écrasé. Un fichier partiellement écrit est supprimé
    avant de remonter l'erreur.
    """

    def __init__(self, root_dir: Path) -> None:
        """
        Initialise le stockage.

        Args :
            root_dir : Répertoire racine des fichiers (créé si nécessaire)
        """
        self._root = Path(root_dir)

    @property
    def root_dir(self) -> Path:
        """Répertoire racine du stockage."""
        return self._root

    def store(self, stream: BinaryIO, original_name: str, content_type: str) -> str:
        """Persiste le flux sous un nom unique et retourne ce nom."""
        extension = self._extension_for(original_name, content_type)
        try:
            self._root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StoreUnavailable(f"Répertoire de stockage inaccessible : {e}") from e

        for _ in range(_MAX_NAME_ATTEMPTS):
            reference = f"{uuid.uuid4().hex}{extension}"
            destination = self._root / reference
            try:
                with open(destination, "xb") as target:
                    shutil.copyfileobj(stream, target, COPY_CHUNK_SIZE)
            except FileExistsError:
                continue
            except OSError as e:
                self._discard(destination)
                raise StoreUnavailable(
                    f"Ecriture impossible pour '{original_name}' : {e}"
                ) from e
            logger.debug(f"Fichier stocke : {original_name} -> {reference}")
            return reference

        raise StoreUnavailable(f"Aucun nom libre pour '{original_name}'")

    def resolve(self, reference: str) -> BinaryIO:
        """Ouvre le fichier stocké en lecture binaire."""
        path = self._path_for(reference)
        try:
            return open(path, "rb")
        except FileNotFoundError:
            raise AssetNotFound(f"Fichier introuvable : {reference}") from None
        except OSError as e:
            raise StoreUnavailable(f"Lecture impossible pour '{reference}' : {e}") from e

    def exists(self, reference: str) -> bool:
        """Vérifie si une référence désigne un fichier stocké."""
        try:
            return self._path_for(reference).is_file()
        except AssetNotFound:
            return False

    def delete(self, reference: str) -> bool:
        """Supprime un fichier stocké."""
        try:
            self._path_for(reference).unlink()
            return True
        except (AssetNotFound, OSError):
            return False

    def list_references(self) -> Iterator[str]:
        """Itère sur les fichiers stockés (les fichiers caches sont ignores)."""
        if not self._root.is_dir():
            return
        for path in sorted(self._root.iterdir()):
            if path.is_file() and not path.name.startswith("."):
                yield path.name

    def _path_for(self, reference: str) -> Path:
        """Chemin d'une référence ; refuse tout ce qui n'est pas un nom simple."""
        if not reference or reference.startswith(".") or Path(reference).name != reference:
            raise AssetNotFound(f"Reference invalide : {reference!r}")
        return self._root / reference

    @staticmethod
    def _extension_for(original_name: str, content_type: str) -> str:
        """Extension du nom original, ou déduite du type MIME a defaut."""
        suffix = Path(original_name or "").suffix.lower()
        if _EXTENSION_PATTERN.match(suffix):
            return suffix
        guessed = mimetypes.guess_extension(content_type or "") or ""
        return guessed if _EXTENSION_PATTERN.match(guessed) else ""

    @staticmethod
    def _discard(path: Path) -> None:
        """Supprime un fichier partiel, sans erreur s'il n'existe pas."""
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(f"Fichier partiel non supprime {path}: {e}")
