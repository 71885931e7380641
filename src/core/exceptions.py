"""
Exceptions du domaine catalogue.

Chaque erreur porte un `kind` stable (expose tel quel aux clients) et le code
HTTP correspondant. La couche web convertit toute CatalogError en reponse
structuree {"error": {"kind", "message"}} sans interrompre le processus.

Erreurs client (detectees avant tout effet de bord) :
- InvalidFilePart, MissingRequiredFiles, MissingOwner, InvalidIdentifier, InvalidField

Erreurs serveur (peuvent laisser des effets de bord deja realises) :
- StoreUnavailable, PartialUploadFailure, RepositoryUnavailable
"""

from typing import Optional, Sequence


class CatalogError(Exception):
    """Classe de base des erreurs du catalogue."""

    kind: str = "CatalogError"
    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, str]:
        """Representation structuree de l'erreur."""
        return {"kind": self.kind, "message": self.message}


class InvalidFilePart(CatalogError):
    """
    Partie de fichier refusee par la politique d'upload.

    Attributes:
        field_name: Nom du champ multipart fautif
        content_type: Type MIME declare par le client
    """

    kind = "InvalidFilePart"
    status_code = 400

    def __init__(
        self,
        message: str,
        field_name: Optional[str] = None,
        content_type: Optional[str] = None,
    ) -> None:
        self.field_name = field_name
        self.content_type = content_type
        super().__init__(message)


class MissingRequiredFiles(CatalogError):
    """Creation sans au moins une miniature et une video."""

    kind = "MissingRequiredFiles"
    status_code = 400


class MissingOwner(CatalogError):
    """Creation sans identifiant de proprietaire."""

    kind = "MissingOwner"
    status_code = 400


class InvalidIdentifier(CatalogError):
    """Identifiant syntaxiquement invalide."""

    kind = "InvalidIdentifier"
    status_code = 400


class InvalidField(CatalogError):
    """Champ texte hors limites (titre, description, confirmation...)."""

    kind = "InvalidField"
    status_code = 400

    def __init__(self, message: str, field_name: Optional[str] = None) -> None:
        self.field_name = field_name
        super().__init__(message)


class InvalidCredentials(CatalogError):
    """Email, mot de passe ou jeton invalide."""

    kind = "InvalidCredentials"
    status_code = 401


class NotFound(CatalogError):
    """Identifiant valide mais aucune entree correspondante."""

    kind = "NotFound"
    status_code = 404


class AssetNotFound(NotFound):
    """Reference inconnue du stockage de fichiers."""

    kind = "AssetNotFound"


class DuplicatePrincipal(CatalogError):
    """Un compte existe deja pour cet email."""

    kind = "DuplicatePrincipal"
    status_code = 409


class StoreUnavailable(CatalogError):
    """Le support de stockage a refuse l'ecriture (disque plein, permissions...)."""

    kind = "StoreUnavailable"
    status_code = 500


class PartialUploadFailure(CatalogError):
    """
    Echec d'ecriture apres qu'au moins un fichier du lot a ete persiste.

    Les fichiers deja ecrits ne sont pas supprimes (blobs orphelins).

    Attributes:
        stored_refs: References deja persistees avant l'echec
        failed_name: Nom original du fichier en echec
    """

    kind = "PartialUploadFailure"
    status_code = 500

    def __init__(
        self,
        message: str,
        stored_refs: Sequence[str] = (),
        failed_name: Optional[str] = None,
    ) -> None:
        self.stored_refs = list(stored_refs)
        self.failed_name = failed_name
        super().__init__(message)


class RepositoryUnavailable(CatalogError):
    """La base de donnees a refuse l'operation."""

    kind = "RepositoryUnavailable"
    status_code = 500
