"""
Dépendances partagées de l'application web.

Chaque requête reçoit sa propre session SQLModel ; les services sont
construits par le Container DI à partir de cette session.
"""

from collections.abc import Iterator
from typing import Optional

from fastapi import Depends, Request
from sqlmodel import Session

from ..container import Container
from ..core.exceptions import InvalidCredentials
from ..services.auth import AuthService
from ..services.query import QueryService
from ..services.upload import UploadService


def get_container(request: Request) -> Container:
    """Container DI attaché à l'application au démarrage."""
    return request.app.state.container


def get_db_session(container: Container = Depends(get_container)) -> Iterator[Session]:
    """Session SQLModel dédiée à la requête, fermée à la fin de celle-ci."""
    session = container.session()
    try:
        yield session
    finally:
        session.close()


def get_upload_service(
    container: Container = Depends(get_container),
    session: Session = Depends(get_db_session),
) -> UploadService:
    return container.upload_service(
        catalog_repository=container.catalog_repository(session=session)
    )


def get_query_service(
    container: Container = Depends(get_container),
    session: Session = Depends(get_db_session),
) -> QueryService:
    return container.query_service(
        catalog_repository=container.catalog_repository(session=session)
    )


def get_auth_service(
    container: Container = Depends(get_container),
    session: Session = Depends(get_db_session),
) -> AuthService:
    return container.auth_service(
        principal_repository=container.principal_repository(session=session)
    )


def get_optional_principal_id(
    request: Request,
    auth_service: AuthService = Depends(get_auth_service),
) -> Optional[str]:
    """
    Identifiant du principal porté par l'en-tête Authorization, s'il existe.

    Un en-tête présent mais invalide est refusé (InvalidCredentials).
    """
    header = request.headers.get("Authorization")
    if not header:
        return None
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise InvalidCredentials("En-tete Authorization invalide (Bearer attendu).")
    return auth_service.authenticate(token.strip())
