"""
Validation des soumissions multipart avant toute persistance.

Le validateur applique la politique d'upload partie par partie :
- nom de champ reconnu (thumbnail / video)
- type MIME autorise pour la famille du champ
- nombre maximum de fichiers par champ
- presence des deux familles quand l'operation l'exige (creation)

Il ne lit jamais le contenu des fichiers : aucune ecriture n'a lieu tant
que la soumission complete n'est pas validee.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from src.core.entities.catalog import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH
from src.core.exceptions import InvalidField, InvalidFilePart, MissingRequiredFiles
from src.core.value_objects.upload import FileKind, FilePart

DEFAULT_IMAGE_TYPES: frozenset[str] = frozenset({"image/jpeg", "image/png"})
DEFAULT_VIDEO_TYPES: frozenset[str] = frozenset({"video/mp4"})
DEFAULT_MAX_FILES_PER_FIELD: int = 5


@dataclass(frozen=True)
class UploadPolicy:
    """
    Politique d'upload.

    Attributs :
        image_types : Types MIME acceptes pour les miniatures
        video_types : Types MIME acceptes pour les videos
        max_files_per_field : Nombre maximum de fichiers par famille
    """

    image_types: frozenset[str] = DEFAULT_IMAGE_TYPES
    video_types: frozenset[str] = DEFAULT_VIDEO_TYPES
    max_files_per_field: int = DEFAULT_MAX_FILES_PER_FIELD

    @classmethod
    def from_settings(cls, settings) -> "UploadPolicy":
        """Construit la politique depuis la configuration."""
        return cls(
            image_types=frozenset(settings.accepted_image_types),
            video_types=frozenset(settings.accepted_video_types),
            max_files_per_field=settings.max_files_per_field,
        )

    def accepted_types(self, kind: FileKind) -> frozenset[str]:
        """Types MIME acceptes pour une famille."""
        return self.image_types if kind is FileKind.THUMBNAIL else self.video_types


@dataclass
class ValidatedUpload:
    """
    Resultat d'une validation reussie.

    Attributs :
        thumbnails : Parties miniatures, dans l'ordre d'envoi
        videos : Parties videos, dans l'ordre d'envoi
    """

    thumbnails: list[FilePart] = field(default_factory=list)
    videos: list[FilePart] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.thumbnails and not self.videos

    def parts_in_store_order(self) -> list[FilePart]:
        """Miniatures puis videos, chacune dans l'ordre d'envoi."""
        return [*self.thumbnails, *self.videos]


class UploadValidator:
    """
    Valide une soumission multipart selon une UploadPolicy.

    Utilisation:
        validator = UploadValidator(UploadPolicy())
        validated = validator.validate(parts, require_both=True)
    """

    def __init__(self, policy: Optional[UploadPolicy] = None) -> None:
        self._policy = policy or UploadPolicy()

    @property
    def policy(self) -> UploadPolicy:
        return self._policy

    def validate(self, parts: Iterable[FilePart], require_both: bool) -> ValidatedUpload:
        """
        Valide toutes les parties et les regroupe par famille.

        Args:
            parts: Parties fichiers soumises
            require_both: True pour exiger au moins une miniature et une video

        Returns:
            ValidatedUpload avec les parties triees par famille

        Raises:
            InvalidFilePart: champ inconnu, type MIME refuse ou trop de fichiers
            MissingRequiredFiles: une famille requise est absente
        """
        result = ValidatedUpload()
        for part in parts:
            kind = self.check_part(part)
            if kind is FileKind.THUMBNAIL:
                result.thumbnails.append(part)
            else:
                result.videos.append(part)

        for kind, group in (
            (FileKind.THUMBNAIL, result.thumbnails),
            (FileKind.VIDEO, result.videos),
        ):
            if len(group) > self._policy.max_files_per_field:
                raise InvalidFilePart(
                    f"Trop de fichiers pour '{kind.value}' : {len(group)} "
                    f"(maximum {self._policy.max_files_per_field})",
                    field_name=kind.value,
                )

        if require_both and (not result.thumbnails or not result.videos):
            raise MissingRequiredFiles(
                "Une miniature et une video sont requises."
            )
        return result

    def check_part(self, part: FilePart) -> FileKind:
        """Valide une partie isolee et retourne sa famille."""
        kind = part.kind
        if kind is None:
            raise InvalidFilePart(
                f"Champ de fichier inconnu : '{part.field_name}'",
                field_name=part.field_name,
                content_type=part.content_type,
            )
        content_type = (part.content_type or "").split(";")[0].strip().lower()
        if content_type not in self._policy.accepted_types(kind):
            raise InvalidFilePart(
                f"Type de fichier invalide pour '{part.field_name}' : "
                f"{part.content_type or 'inconnu'}",
                field_name=part.field_name,
                content_type=part.content_type,
            )
        return kind


def validate_text_fields(
    title: Optional[str] = None,
    description: Optional[str] = None,
) -> None:
    """
    Verifie les bornes des champs texte presents.

    Raises:
        InvalidField: titre > 50 caracteres ou description > 200 caracteres
    """
    if title is not None and len(title) > TITLE_MAX_LENGTH:
        raise InvalidField(
            f"Le titre depasse {TITLE_MAX_LENGTH} caracteres.", field_name="title"
        )
    if description is not None and len(description) > DESCRIPTION_MAX_LENGTH:
        raise InvalidField(
            f"La description depasse {DESCRIPTION_MAX_LENGTH} caracteres.",
            field_name="description",
        )
