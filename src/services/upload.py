"""
Service d'upload et de catalogage.

Ce module orchestre le validateur, le stockage de fichiers et le repository
du catalogue :
- Creation : validation complete, stockage de chaque fichier, puis ecriture
  de l'entree
- Mise a jour : remplacement des listes de references pour les familles
  soumises, fusion des champs texte presents
- Suppression : retrait de l'entree, eviction optionnelle des fichiers

L'entree n'est ecrite qu'apres le stockage de tous les fichiers de l'appel.
Un echec de stockage en cours de lot ne supprime pas les fichiers deja
ecrits (blobs orphelins, recuperables via OrphanSweeper).
"""

from dataclasses import dataclass
from typing import Any, Iterable, Optional

from loguru import logger

from src.core.entities.catalog import CatalogEntry
from src.core.exceptions import (
    MissingOwner,
    NotFound,
    PartialUploadFailure,
    StoreUnavailable,
)
from src.core.ports.asset_store import IAssetStore
from src.core.ports.repositories import ICatalogRepository
from src.core.value_objects.identifiers import parse_identifier
from src.core.value_objects.upload import FilePart
from src.services.upload_validator import (
    UploadValidator,
    ValidatedUpload,
    validate_text_fields,
)


@dataclass
class StoredAssets:
    """
    References produites par une etape de stockage.

    Attributs :
        thumbnail_refs : References des miniatures, dans l'ordre d'envoi
        video_refs : References des videos, dans l'ordre d'envoi
    """

    thumbnail_refs: list[str]
    video_refs: list[str]


class UploadService:
    """
    Orchestrateur upload -> stockage -> catalogue.

    Utilisation:
        service = UploadService(validator, asset_store, catalog_repo)
        entry = service.create(parts, owner_id="u1", title="Sunset")
        entry = service.update(entry.id, title="Sunset Clip")
        previous = service.delete(entry.id)
    """

    def __init__(
        self,
        validator: UploadValidator,
        asset_store: IAssetStore,
        catalog_repository: ICatalogRepository,
        evict_assets_on_delete: bool = False,
    ) -> None:
        """
        Initialise le service.

        Args:
            validator: Validateur de la politique d'upload
            asset_store: Stockage des fichiers
            catalog_repository: Repository des entrees
            evict_assets_on_delete: Supprimer les fichiers d'une entree supprimee
        """
        self._validator = validator
        self._store = asset_store
        self._repo = catalog_repository
        self._evict_on_delete = evict_assets_on_delete

    def create(
        self,
        parts: Iterable[FilePart],
        owner_id: Optional[str],
        title: Optional[str] = None,
        description: Optional[str] = None,
    ) -> CatalogEntry:
        """
        Cree une entree a partir d'une soumission complete.

        Toutes les verifications precedent la premiere ecriture.

        Raises:
            InvalidField: titre ou description hors limites
            InvalidFilePart: partie refusee par la politique
            MissingRequiredFiles: miniature ou video absente
            MissingOwner: proprietaire absent
            StoreUnavailable / PartialUploadFailure: echec de stockage
        """
        validate_text_fields(title, description)
        validated = self._validator.validate(parts, require_both=True)
        if owner_id is None or not owner_id.strip():
            raise MissingOwner("Le proprietaire (ownerId) est requis.")

        stored = self._store_all(validated)
        entry = self._repo.create(
            CatalogEntry(
                title=title,
                description=description,
                thumbnail_refs=stored.thumbnail_refs,
                video_refs=stored.video_refs,
                owner_id=owner_id.strip(),
            )
        )
        logger.info(
            f"Entree creee : {entry.id} "
            f"({len(entry.thumbnail_refs)} miniature(s), {len(entry.video_refs)} video(s))"
        )
        return entry

    def update(
        self,
        entry_id: str,
        parts: Iterable[FilePart] = (),
        title: Optional[str] = None,
        description: Optional[str] = None,
    ) -> CatalogEntry:
        """
        Met a jour une entree existante.

        Seuls les champs presents (non None) et les familles de fichiers
        soumises sont modifies ; une famille soumise remplace entierement
        la liste de references correspondante.

        Raises:
            InvalidIdentifier: ID mal forme
            NotFound: ID inconnu
            InvalidField / InvalidFilePart: soumission refusee
            StoreUnavailable / PartialUploadFailure: echec de stockage
        """
        entry_id = parse_identifier(entry_id)
        current = self._repo.get(entry_id)
        if current is None:
            raise NotFound(f"Entree introuvable : {entry_id}")

        validate_text_fields(title, description)
        validated = self._validator.validate(parts, require_both=False)

        changes: dict[str, Any] = {}
        if title is not None:
            changes["title"] = title
        if description is not None:
            changes["description"] = description

        if not validated.is_empty:
            stored = self._store_all(validated)
            if validated.thumbnails:
                changes["thumbnail_refs"] = stored.thumbnail_refs
            if validated.videos:
                changes["video_refs"] = stored.video_refs

        if not changes:
            logger.debug(f"Aucune modification pour {entry_id}")
            return current

        updated = self._repo.update(entry_id, changes)
        if updated is None:
            # Supprimee entre la lecture et l'ecriture (requete concurrente)
            raise NotFound(f"Entree introuvable : {entry_id}")
        logger.info(f"Entree mise a jour : {entry_id} (champs: {', '.join(sorted(changes))})")
        return updated

    def delete(self, entry_id: str) -> CatalogEntry:
        """
        Supprime une entree et retourne son etat anterieur.

        Raises:
            InvalidIdentifier: ID mal forme
            NotFound: ID inconnu
        """
        entry_id = parse_identifier(entry_id)
        previous = self._repo.delete(entry_id)
        if previous is None:
            raise NotFound(f"Entree introuvable : {entry_id}")

        if self._evict_on_delete:
            evicted = sum(1 for ref in previous.asset_refs if self._store.delete(ref))
            logger.info(f"Entree supprimee : {entry_id} ({evicted} fichier(s) supprime(s))")
        else:
            logger.info(f"Entree supprimee : {entry_id}")
        return previous

    def _store_all(self, validated: ValidatedUpload) -> StoredAssets:
        """
        Stocke les miniatures puis les videos, dans l'ordre d'envoi.

        Raises:
            StoreUnavailable: echec avant tout fichier persiste
            PartialUploadFailure: echec apres au moins un fichier persiste
        """
        stored_refs: list[str] = []
        for part in validated.parts_in_store_order():
            try:
                reference = self._store.store(part.stream, part.filename, part.content_type)
            except StoreUnavailable as e:
                if not stored_refs:
                    logger.error(f"Stockage indisponible pour {part.filename}: {e.message}")
                    raise
                logger.error(
                    f"Echec de stockage pour {part.filename} apres "
                    f"{len(stored_refs)} fichier(s) : {e.message}"
                )
                raise PartialUploadFailure(
                    f"Upload interrompu sur '{part.filename}' : {e.message}",
                    stored_refs=stored_refs,
                    failed_name=part.filename,
                ) from e
            stored_refs.append(reference)

        split = len(validated.thumbnails)
        return StoredAssets(
            thumbnail_refs=stored_refs[:split],
            video_refs=stored_refs[split:],
        )
