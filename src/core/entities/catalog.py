"""
Entité entrée de catalogue.

Une entrée de catalogue regroupe les métadonnées d'une courte vidéo (titre,
description) et les références vers les fichiers stockés (miniatures, vidéos).
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

# Bornes des champs texte
TITLE_MAX_LENGTH = 50
DESCRIPTION_MAX_LENGTH = 200


@dataclass
class CatalogEntry:
    """
    Représente une courte vidéo enregistrée dans le catalogue.

    Attributs :
        id : Identifiant opaque (UUID4), attribué par le repository à la création
        title : Titre optionnel (50 caractères maximum)
        description : Description optionnelle (200 caractères maximum)
        thumbnail_refs : Références des miniatures stockées, dans l'ordre d'envoi
        video_refs : Références des vidéos stockées, dans l'ordre d'envoi
        owner_id : Identifiant du principal authentifié ayant créé l'entrée
        created_at : Date de création de l'enregistrement
        updated_at : Date de dernière modification de l'enregistrement
    """

    id: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    thumbnail_refs: list[str] = field(default_factory=list)
    video_refs: list[str] = field(default_factory=list)
    owner_id: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def asset_refs(self) -> list[str]:
        """Toutes les références de fichiers (miniatures puis vidéos)."""
        return [*self.thumbnail_refs, *self.video_refs]
