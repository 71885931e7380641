"""
Adaptateurs de sécurité : hachage des mots de passe et jetons JWT.

- Argon2PasswordHasher : passlib (schéma argon2, backend argon2-cffi)
- JWTTokenCodec : jetons HS256 signés avec python-jose
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from src.core.ports.security import IPasswordHasher, ITokenCodec


class Argon2PasswordHasher(IPasswordHasher):
    """Hachage argon2 via passlib."""

    def __init__(self) -> None:
        self._context = CryptContext(schemes=["argon2"], deprecated="auto")

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bool(self._context.verify(password, password_hash))
        except ValueError:
            # Hash illisible (format inconnu)
            return False


class JWTTokenCodec(ITokenCodec):
    """
    Jetons d'accès JWT.

    Le payload contient le sujet (`sub`), les claims fournis et
    l'expiration (`exp`).
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expire_minutes: int = 60,
    ) -> None:
        """
        Args :
            secret : Clé de signature
            algorithm : Algorithme de signature
            expire_minutes : Durée de validité des jetons émis
        """
        self._secret = secret
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes

    def encode(
        self,
        subject: str,
        claims: Optional[dict[str, Any]] = None,
        now: Optional[datetime] = None,
    ) -> str:
        current_time = now if now is not None else datetime.now(timezone.utc)
        payload: dict[str, Any] = dict(claims or {})
        payload["sub"] = subject
        payload["exp"] = current_time + timedelta(minutes=self._expire_minutes)
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def decode(self, token: str) -> Optional[dict[str, Any]]:
        try:
            return jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except JWTError:
            return None
