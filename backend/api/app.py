"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from shared.exceptions import ConfigurationError

from .dependencies import get_container
from .errors import register_exception_handlers
from .routes import health
from modules.auth.routes import router as auth_router
from modules.inventory.routes import router as inventory_router
from modules.meals.routes import router as meals_router
from modules.preferences.routes import router as preferences_router
from modules.suggestions.routes import router as suggestions_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic. A missing signing secret stops
    startup; the database and model keys are checked on first use.
    """
    # Startup
    settings = get_settings()
    if not settings.jwt_secret:
        raise ConfigurationError("JWT_SECRET")
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")
    yield
    # Shutdown
    await get_container().background.drain()
    logger.info(f"Shutting down {settings.app_name}")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="Meal history, preferences and AI meal suggestions",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
        expose_headers=["X-New-Token"],
    )

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
    app.include_router(preferences_router, prefix="/api/preferences", tags=["preferences"])
    app.include_router(suggestions_router, prefix="/api/meals", tags=["suggestions"])
    app.include_router(meals_router, prefix="/api/meals", tags=["meals"])
    app.include_router(inventory_router, prefix="/api/inventory", tags=["inventory"])

    return app


# Application instance for uvicorn
app = create_app()
