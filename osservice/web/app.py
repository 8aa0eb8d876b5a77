"""
Application FastAPI d'OsService.

Initialise l'application web avec le Container DI, enregistre la
traduction des erreurs metier et monte les routes JSON.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from loguru import logger

from .. import __version__
from ..container import Container
from .errors import register_exception_handlers
from .routes.customers import router as customers_router
from .routes.service_orders import router as service_orders_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialise la base au démarrage et libère les ressources à l'arrêt."""
    container: Container = app.state.container
    container.database.init()
    logger.info("API OsService démarrée", version=__version__)
    yield
    container.database.shutdown()


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Construit l'application FastAPI.

    Args:
        container: Container DI à utiliser (un nouveau Container par défaut)
    """
    app = FastAPI(title="OsService", version=__version__, lifespan=lifespan)
    app.state.container = container or Container()

    register_exception_handlers(app)

    app.include_router(customers_router)
    app.include_router(service_orders_router)

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "ok", "version": __version__}

    return app
