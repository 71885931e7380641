"""
Application FastAPI de ShortCat.

Initialise l'application web avec le Container DI, convertit les erreurs
du catalogue en réponses structurées, monte les routes et sert les fichiers
stockés en statique.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from loguru import logger

from ..container import Container
from ..core.exceptions import CatalogError
from ..logging_config import configure_logging, new_request_id
from .routes.auth import router as auth_router
from .routes.catalog import router as catalog_router

REQUEST_ID_HEADER = "X-Request-ID"


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Construit l'application.

    Args:
        container: Container DI a utiliser (un nouveau par defaut)
    """
    container = container or Container()
    settings = container.config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialise la base au démarrage et libère les ressources à l'arrêt."""
        configure_logging(settings)
        settings.upload_dir.mkdir(parents=True, exist_ok=True)
        container.database.init()
        if not settings.jwt_secret_configured:
            logger.warning("SHORTCAT_JWT_SECRET non defini : secret de developpement utilise")
        yield
        container.shutdown_resources()

    app = FastAPI(title="ShortCat", lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def bind_request_context(request: Request, call_next):
        """Rattache un identifiant de requete a tous les logs emis pendant celle-ci."""
        request_id = new_request_id(request.headers.get(REQUEST_ID_HEADER))
        with logger.contextualize(request_id=request_id):
            response = await call_next(request)
            logger.debug(
                f"{request.method} {request.url.path} -> {response.status_code}"
            )
        response.headers[REQUEST_ID_HEADER] = request_id
        return response

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        """Erreur structurée ; le processus continue de servir."""
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} -> {exc.kind}: {exc.message}")
        else:
            logger.warning(f"{request.method} {request.url.path} -> {exc.kind}: {exc.message}")
        return JSONResponse({"error": exc.to_dict()}, status_code=exc.status_code)

    @app.get("/health")
    async def health_check():
        return {"status": "healthy", "service": "shortcat"}

    # Routes
    app.include_router(catalog_router)
    app.include_router(auth_router)

    # Fichiers stockés (lecture seule, requetes Range supportees)
    app.mount(
        "/uploads",
        StaticFiles(directory=settings.upload_dir, check_dir=False),
        name="uploads",
    )
    return app


app = create_app()
