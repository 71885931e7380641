"""
Identifiants opaques des entrées de catalogue et des principaux.

Format : UUID4 sous forme canonique (36 caractères, hexadécimal minuscule
avec tirets). La validation syntaxique a lieu avant tout accès au repository.
"""

import uuid

from src.core.exceptions import InvalidIdentifier


def new_identifier() -> str:
    """Génère un nouvel identifiant, jamais réutilisé."""
    return str(uuid.uuid4())


def parse_identifier(raw: str) -> str:
    """
    Valide un identifiant et retourne sa forme canonique.

    Args :
        raw : Identifiant reçu du client

    Retourne :
        L'identifiant normalisé (minuscules)

    Lève :
        InvalidIdentifier : si la chaîne n'est pas un UUID sous forme canonique
    """
    candidate = (raw or "").strip().lower()
    try:
        parsed = uuid.UUID(candidate)
    except ValueError:
        raise InvalidIdentifier(f"Identifiant invalide : {raw!r}") from None
    if str(parsed) != candidate:
        # Refuse les variantes acceptees par uuid.UUID (accolades, sans tirets, urn:)
        raise InvalidIdentifier(f"Identifiant invalide : {raw!r}")
    return candidate
