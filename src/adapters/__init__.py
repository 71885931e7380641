"""
Couche adaptateurs.

Les adaptateurs implémentent les ports définis dans core/ports/ :
- asset_store : Stockage des fichiers sur le système de fichiers local
- security : Hachage argon2 (passlib) et jetons JWT (python-jose)

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""

from src.adapters.asset_store import LocalAssetStore
from src.adapters.security import Argon2PasswordHasher, JWTTokenCodec

__all__ = [
    "LocalAssetStore",
    "Argon2PasswordHasher",
    "JWTTokenCodec",
]
