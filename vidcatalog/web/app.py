"""
Application FastAPI de VidCatalog.

Initialise l'application web avec le Container DI, connecte le store au
démarrage, configure CORS, les gestionnaires d'erreurs et monte les routes.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from .. import __version__
from ..adapters.api.youtube_client import YouTubeClient
from ..container import Container
from .errors import register_error_handlers
from .routes.videos import router as videos_router


def create_app(container: Optional[Container] = None) -> FastAPI:
    """
    Construit l'application web.

    Args:
        container: Container DI a utiliser (les tests passent un container
            dont les providers sont surcharges)
    """
    container = container or Container()
    settings = container.config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Connecte le store au démarrage (échec fatal) et libère les ressources à l'arrêt."""
        container.database.init()
        # close() ne ferme que le client HTTP ouvert par une requete
        provider = container.youtube_client()
        app.state.container = container
        logger.info("VidCatalog démarré", version=__version__)
        try:
            yield
        finally:
            try:
                if isinstance(provider, YouTubeClient):
                    await provider.close()
            finally:
                container.database.shutdown()

    app = FastAPI(title="VidCatalog", version=__version__, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    # Routes
    app.include_router(videos_router)

    return app


app = create_app()
