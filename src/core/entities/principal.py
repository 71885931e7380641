"""
Entité principal (compte utilisateur).

Le principal est géré par le collaborateur d'authentification. Le catalogue
ne fait que recevoir son identifiant comme propriétaire d'une entrée.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class Role(Enum):
    """Rôle d'un principal."""

    USER = "user"
    PHOTOGRAPHER = "photographer"


@dataclass
class Principal:
    """
    Compte enregistré.

    Attributs :
        id : Identifiant opaque (UUID4)
        email : Adresse email unique, stockée en minuscules
        password_hash : Hash argon2 du mot de passe
        role : Rôle du compte
    """

    id: Optional[str] = None
    email: str = ""
    password_hash: str = ""
    role: Role = Role.USER
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
