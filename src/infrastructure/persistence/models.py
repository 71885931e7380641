"""
Modeles SQLModel pour la base de donnees ShortCat.

Ces modeles representent les tables de la base de donnees SQLite.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- catalog_entries: Entrees du catalogue (metadonnees + references de fichiers)
- principals: Comptes du collaborateur d'authentification

Les champs JSON (*_json) permettent de stocker des listes (references)
de maniere serialisee dans SQLite.
"""

from __future__ import annotations

import json
import unicodedata
from datetime import datetime, timezone

from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    """Horodatage UTC courant."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime | None) -> datetime | None:
    """Rattache UTC aux horodatages relus sans fuseau (SQLite)."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def fold_title(title: str | None) -> str | None:
    """Forme de recherche d'un titre : NFC puis casefold (accents compris)."""
    if title is None:
        return None
    return unicodedata.normalize("NFC", title).casefold()


class CatalogEntryModel(SQLModel, table=True):
    """
    Modele representant une entree de catalogue.

    Les references de fichiers sont stockees en JSON, dans l'ordre d'envoi.
    """

    __tablename__ = "catalog_entries"

    id: str = Field(primary_key=True, max_length=36)
    title: str | None = Field(default=None, max_length=50)
    title_folded: str | None = Field(default=None, index=True)  # recherche sans casse
    description: str | None = Field(default=None, max_length=200)
    thumbnail_refs_json: str = Field(default="[]")  # JSON: ["ab12...jpg"]
    video_refs_json: str = Field(default="[]")  # JSON: ["cd34...mp4"]
    owner_id: str = Field(index=True)
    created_at: datetime = Field(default_factory=utcnow, index=True)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def thumbnail_refs(self) -> list[str]:
        """Retourne les references de miniatures deserialisees."""
        return json.loads(self.thumbnail_refs_json) if self.thumbnail_refs_json else []

    @property
    def video_refs(self) -> list[str]:
        """Retourne les references de videos deserialisees."""
        return json.loads(self.video_refs_json) if self.video_refs_json else []


class PrincipalModel(SQLModel, table=True):
    """Modele representant un compte."""

    __tablename__ = "principals"

    id: str = Field(primary_key=True, max_length=36)
    email: str = Field(index=True, unique=True)
    password_hash: str
    role: str = Field(default="user")  # "user" | "photographer"
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
