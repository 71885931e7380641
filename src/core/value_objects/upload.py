"""
Objets valeur décrivant une soumission multipart.

Ces objets sont indépendants du framework HTTP : la couche web convertit
les parties multipart reçues en FilePart avant d'appeler les services.
"""

from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO, Optional


class FileKind(Enum):
    """Famille de fichier reconnue, identifiée par le nom du champ multipart."""

    THUMBNAIL = "thumbnail"
    VIDEO = "video"

    @classmethod
    def from_field_name(cls, field_name: str) -> Optional["FileKind"]:
        """Retourne la famille correspondant au nom de champ, ou None si inconnu."""
        for kind in cls:
            if kind.value == field_name:
                return kind
        return None


@dataclass(frozen=True)
class FilePart:
    """
    Partie fichier d'une soumission multipart.

    Attributs :
        field_name : Nom du champ multipart ("thumbnail", "video", ...)
        content_type : Type MIME déclaré par le client
        filename : Nom de fichier original
        stream : Contenu binaire (lu une seule fois par le stockage)
    """

    field_name: str
    content_type: str
    filename: str
    stream: BinaryIO

    @property
    def kind(self) -> Optional[FileKind]:
        """Famille déduite du nom de champ."""
        return FileKind.from_field_name(self.field_name)
