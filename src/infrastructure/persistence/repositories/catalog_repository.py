"""
Implementation SQLModel du repository CatalogEntry.

Implemente l'interface ICatalogRepository pour la persistance des entrees
de catalogue dans la base de donnees SQLite via SQLModel.
"""

import json
from typing import Any, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, col, select

from src.core.entities.catalog import CatalogEntry
from src.core.exceptions import RepositoryUnavailable
from src.core.ports.repositories import ICatalogRepository
from src.core.value_objects.identifiers import new_identifier
from src.infrastructure.persistence.models import (
    CatalogEntryModel,
    as_utc,
    fold_title,
    utcnow,
)

# Champs modifiables par update() -> colonne du modele
_UPDATABLE_FIELDS = ("title", "description", "thumbnail_refs", "video_refs")


class SQLModelCatalogRepository(ICatalogRepository):
    """
    Repository SQLModel pour les entrees de catalogue.

    Implemente ICatalogRepository avec conversion bidirectionnelle
    entre l'entite CatalogEntry (domaine) et CatalogEntryModel (persistance).
    Les erreurs SQLAlchemy sont converties en RepositoryUnavailable.
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _to_entity(self, model: CatalogEntryModel) -> CatalogEntry:
        """
        Convertit un modele DB en entite domaine.

        Args :
            model : Le modele CatalogEntryModel depuis la DB

        Retourne :
            L'entite CatalogEntry correspondante
        """
        return CatalogEntry(
            id=model.id,
            title=model.title,
            description=model.description,
            thumbnail_refs=model.thumbnail_refs,
            video_refs=model.video_refs,
            owner_id=model.owner_id,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    def _to_model(self, entity: CatalogEntry) -> CatalogEntryModel:
        """
        Convertit une entite domaine en modele DB.

        L'ID et les horodatages sont toujours attribues ici.
        """
        now = utcnow()
        return CatalogEntryModel(
            id=new_identifier(),
            title=entity.title,
            title_folded=fold_title(entity.title),
            description=entity.description,
            thumbnail_refs_json=json.dumps(list(entity.thumbnail_refs)),
            video_refs_json=json.dumps(list(entity.video_refs)),
            owner_id=entity.owner_id,
            created_at=now,
            updated_at=now,
        )

    def create(self, entry: CatalogEntry) -> CatalogEntry:
        """Enregistre une nouvelle entree avec un ID neuf."""
        model = self._to_model(entry)
        try:
            self._session.add(model)
            self._session.commit()
            self._session.refresh(model)
        except SQLAlchemyError as e:
            self._session.rollback()
            raise RepositoryUnavailable(f"Creation impossible : {e}") from e
        return self._to_entity(model)

    def get(self, entry_id: str) -> Optional[CatalogEntry]:
        """Recupere une entree par son ID."""
        try:
            model = self._session.get(CatalogEntryModel, entry_id)
        except SQLAlchemyError as e:
            raise RepositoryUnavailable(f"Lecture impossible : {e}") from e
        if model:
            return self._to_entity(model)
        return None

    def list_all(self) -> list[CatalogEntry]:
        """Liste toutes les entrees par ordre de creation."""
        statement = select(CatalogEntryModel).order_by(col(CatalogEntryModel.created_at))
        return self._fetch(statement)

    def search_by_title(self, substring: str) -> list[CatalogEntry]:
        """
        Recherche insensible a la casse, accents compris.

        La sous-chaine est comparee a la colonne title_folded (casefold) :
        lower() de SQLite ne traite que l'ASCII. Une chaine vide retourne tout.
        """
        if not substring:
            return self.list_all()
        statement = (
            select(CatalogEntryModel)
            .where(
                col(CatalogEntryModel.title_folded).contains(
                    fold_title(substring), autoescape=True
                )
            )
            .order_by(col(CatalogEntryModel.created_at))
        )
        return self._fetch(statement)

    def update(self, entry_id: str, fields: dict[str, Any]) -> Optional[CatalogEntry]:
        """Fusionne les champs fournis ; les autres restent inchanges."""
        unknown = set(fields) - set(_UPDATABLE_FIELDS)
        if unknown:
            raise ValueError(f"Champs non modifiables : {sorted(unknown)}")

        try:
            model = self._session.get(CatalogEntryModel, entry_id)
            if model is None:
                return None

            if "title" in fields:
                model.title = fields["title"]
                model.title_folded = fold_title(fields["title"])
            if "description" in fields:
                model.description = fields["description"]
            if "thumbnail_refs" in fields:
                model.thumbnail_refs_json = json.dumps(list(fields["thumbnail_refs"]))
            if "video_refs" in fields:
                model.video_refs_json = json.dumps(list(fields["video_refs"]))
            model.updated_at = utcnow()

            self._session.add(model)
            self._session.commit()
            self._session.refresh(model)
        except SQLAlchemyError as e:
            self._session.rollback()
            raise RepositoryUnavailable(f"Mise a jour impossible : {e}") from e
        return self._to_entity(model)

    def delete(self, entry_id: str) -> Optional[CatalogEntry]:
        """Supprime une entree et retourne son etat anterieur."""
        try:
            model = self._session.get(CatalogEntryModel, entry_id)
            if model is None:
                return None
            previous = self._to_entity(model)
            self._session.delete(model)
            self._session.commit()
        except SQLAlchemyError as e:
            self._session.rollback()
            raise RepositoryUnavailable(f"Suppression impossible : {e}") from e
        return previous

    def _fetch(self, statement) -> list[CatalogEntry]:
        """Execute une requete de lecture et convertit les resultats."""
        try:
            models = self._session.exec(statement).all()
        except SQLAlchemyError as e:
            raise RepositoryUnavailable(f"Lecture impossible : {e}") from e
        return [self._to_entity(model) for model in models]
