"""
Interfaces ports pour le collaborateur d'authentification.

Le hachage des mots de passe et l'émission des jetons sont isolés derrière
ces ports pour que le service d'authentification reste testable sans crypto.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class IPasswordHasher(ABC):
    """Hachage et vérification des mots de passe."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Retourne le hash du mot de passe."""
        ...

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """Vérifie un mot de passe contre son hash."""
        ...


class ITokenCodec(ABC):
    """Émission et décodage des jetons d'accès."""

    @abstractmethod
    def encode(self, subject: str, claims: Optional[dict[str, Any]] = None) -> str:
        """Émet un jeton signé pour le sujet donné."""
        ...

    @abstractmethod
    def decode(self, token: str) -> Optional[dict[str, Any]]:
        """Décode un jeton ; retourne None s'il est invalide ou expiré."""
        ...
