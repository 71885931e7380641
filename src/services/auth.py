"""
Service d'authentification (collaborateur du catalogue).

Gere l'inscription et la connexion des comptes, et l'emission des jetons
d'acces. Le catalogue ne consomme que l'identifiant du principal
authentifie (proprietaire des entrees).
"""

from dataclasses import dataclass
from typing import Optional

from loguru import logger

from src.core.entities.principal import Principal, Role
from src.core.exceptions import DuplicatePrincipal, InvalidCredentials, InvalidField
from src.core.ports.repositories import IPrincipalRepository
from src.core.ports.security import IPasswordHasher, ITokenCodec


@dataclass
class AuthResult:
    """
    Resultat d'une inscription ou d'une connexion.

    Attributs:
        token: Jeton d'acces signe
        principal: Compte authentifie
    """

    token: str
    principal: Principal


class AuthService:
    """Inscription, connexion et decodage des jetons."""

    def __init__(
        self,
        principal_repository: IPrincipalRepository,
        password_hasher: IPasswordHasher,
        token_codec: ITokenCodec,
    ) -> None:
        self._repo = principal_repository
        self._hasher = password_hasher
        self._tokens = token_codec

    def register(
        self,
        email: str,
        password: str,
        confirm_password: Optional[str] = None,
        role: Optional[str] = None,
    ) -> AuthResult:
        """
        Cree un compte et retourne un jeton.

        Raises:
            InvalidField: email ou mot de passe vide, confirmation differente, role inconnu
            DuplicatePrincipal: email deja enregistre
        """
        email = (email or "").strip().lower()
        if not email or not password:
            raise InvalidField("Email et mot de passe requis.")
        if confirm_password is not None and confirm_password != password:
            raise InvalidField(
                "La confirmation ne correspond pas au mot de passe.",
                field_name="confirmPassword",
            )
        principal_role = self._parse_role(role)

        if self._repo.get_by_email(email) is not None:
            raise DuplicatePrincipal(f"Un compte existe deja pour {email}")

        principal = self._repo.save(
            Principal(
                email=email,
                password_hash=self._hasher.hash(password),
                role=principal_role,
            )
        )
        logger.info(f"Compte cree : {principal.id} ({principal.role.value})")
        return AuthResult(token=self._issue(principal), principal=principal)

    def login(self, email: str, password: str) -> AuthResult:
        """
        Verifie les identifiants et retourne un jeton.

        Raises:
            InvalidCredentials: email inconnu ou mot de passe incorrect
        """
        principal = self._repo.get_by_email((email or "").strip().lower())
        if principal is None or not self._hasher.verify(password or "", principal.password_hash):
            raise InvalidCredentials("Email ou mot de passe invalide.")
        return AuthResult(token=self._issue(principal), principal=principal)

    def authenticate(self, token: str) -> str:
        """
        Retourne l'identifiant du principal porte par un jeton.

        Raises:
            InvalidCredentials: jeton invalide, expire ou sans sujet
        """
        payload = self._tokens.decode(token)
        if not payload or not payload.get("sub"):
            raise InvalidCredentials("Jeton d'acces invalide ou expire.")
        return str(payload["sub"])

    def _issue(self, principal: Principal) -> str:
        """Emet un jeton pour le compte."""
        return self._tokens.encode(principal.id, {"role": principal.role.value})

    @staticmethod
    def _parse_role(role: Optional[str]) -> Role:
        """Role demande, ou USER par defaut (insensible a la casse)."""
        if not role:
            return Role.USER
        try:
            return Role(role.strip().lower())
        except ValueError:
            raise InvalidField(f"Role inconnu : {role}", field_name="role") from None
