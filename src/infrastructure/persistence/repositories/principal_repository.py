"""
Implementation SQLModel du repository Principal.

Persistance des comptes du collaborateur d'authentification.
"""

from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from src.core.entities.principal import Principal, Role
from src.core.exceptions import DuplicatePrincipal, RepositoryUnavailable
from src.core.ports.repositories import IPrincipalRepository
from src.core.value_objects.identifiers import new_identifier
from src.infrastructure.persistence.models import PrincipalModel, as_utc, utcnow


class SQLModelPrincipalRepository(IPrincipalRepository):
    """Repository SQLModel pour les comptes."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def _to_entity(self, model: PrincipalModel) -> Principal:
        """Convertit un modele DB en entite domaine."""
        return Principal(
            id=model.id,
            email=model.email,
            password_hash=model.password_hash,
            role=Role(model.role),
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    def get_by_id(self, principal_id: str) -> Optional[Principal]:
        """Recupere un compte par son ID."""
        model = self._session.get(PrincipalModel, principal_id)
        if model:
            return self._to_entity(model)
        return None

    def get_by_email(self, email: str) -> Optional[Principal]:
        """Recupere un compte par son email."""
        statement = select(PrincipalModel).where(PrincipalModel.email == email.lower())
        model = self._session.exec(statement).first()
        if model:
            return self._to_entity(model)
        return None

    def save(self, principal: Principal) -> Principal:
        """Enregistre un nouveau compte (l'email est unique)."""
        now = utcnow()
        model = PrincipalModel(
            id=new_identifier(),
            email=principal.email.lower(),
            password_hash=principal.password_hash,
            role=principal.role.value,
            created_at=now,
            updated_at=now,
        )
        try:
            self._session.add(model)
            self._session.commit()
            self._session.refresh(model)
        except IntegrityError as e:
            self._session.rollback()
            raise DuplicatePrincipal(f"Un compte existe deja pour {principal.email}") from e
        except SQLAlchemyError as e:
            self._session.rollback()
            raise RepositoryUnavailable(f"Creation du compte impossible : {e}") from e
        return self._to_entity(model)
