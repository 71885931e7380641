"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web.
La configuration (Settings) est la seule source des chemins, URL et secrets :
elle est injectee a la construction de l'engine, du stockage et des jetons.
"""

from dependency_injector import containers, providers
from sqlmodel import Session

from .adapters.asset_store import LocalAssetStore
from .adapters.security import Argon2PasswordHasher, JWTTokenCodec
from .config import Settings
from .infrastructure.persistence.database import create_db_engine, init_db
from .infrastructure.persistence.repositories import (
    SQLModelCatalogRepository,
    SQLModelPrincipalRepository,
)
from .services.auth import AuthService
from .services.orphans import OrphanSweeper
from .services.query import QueryService
from .services.upload import UploadService
from .services.upload_validator import UploadPolicy, UploadValidator


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Cree les tables une fois
        session = container.session()
        service = container.upload_service(
            catalog_repository=container.catalog_repository(session=session)
        )

    Pour les tests, surcharger la configuration avant tout appel :
        container.config.override(providers.Object(test_settings))
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Database - engine unique, tables creees par la Resource
    engine = providers.Singleton(
        create_db_engine,
        database_url=config.provided.database_url,
    )
    database = providers.Resource(init_db, engine=engine)

    # Session - nouvelle session a chaque appel (fermee par l'appelant)
    session = providers.Factory(Session, engine)

    # Adapters - implementations concretes des ports
    asset_store = providers.Singleton(
        LocalAssetStore,
        root_dir=config.provided.upload_dir,
    )
    password_hasher = providers.Singleton(Argon2PasswordHasher)
    token_codec = providers.Singleton(
        JWTTokenCodec,
        secret=config.provided.effective_jwt_secret,
        algorithm=config.provided.jwt_algorithm,
        expire_minutes=config.provided.token_expire_minutes,
    )

    # Politique d'upload (stateless - Singletons)
    upload_policy = providers.Singleton(UploadPolicy.from_settings, config)
    upload_validator = providers.Singleton(UploadValidator, policy=upload_policy)

    # Repositories - Factory pour nouvelle instance avec session fraiche
    catalog_repository = providers.Factory(
        SQLModelCatalogRepository,
        session=session,
    )
    principal_repository = providers.Factory(
        SQLModelPrincipalRepository,
        session=session,
    )

    # Services - Factory car dependent des repositories
    upload_service = providers.Factory(
        UploadService,
        validator=upload_validator,
        asset_store=asset_store,
        catalog_repository=catalog_repository,
        evict_assets_on_delete=config.provided.evict_assets_on_delete,
    )
    query_service = providers.Factory(
        QueryService,
        catalog_repository=catalog_repository,
    )
    auth_service = providers.Factory(
        AuthService,
        principal_repository=principal_repository,
        password_hasher=password_hasher,
        token_codec=token_codec,
    )
    orphan_sweeper = providers.Factory(
        OrphanSweeper,
        asset_store=asset_store,
        catalog_repository=catalog_repository,
    )
