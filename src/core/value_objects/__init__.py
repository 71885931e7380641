"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- FileKind : Famille de fichier (miniature, video)
- FilePart : Partie fichier d'une soumission multipart
- new_identifier / parse_identifier : Identifiants opaques (UUID4)
"""

from src.core.value_objects.identifiers import new_identifier, parse_identifier
from src.core.value_objects.upload import FileKind, FilePart

__all__ = [
    "FileKind",
    "FilePart",
    "new_identifier",
    "parse_identifier",
]
