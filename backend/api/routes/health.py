"""
Health check endpoints.

Provides endpoints for monitoring application health and readiness.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from shared.config import get_settings
from shared.database import is_database_configured

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response model."""

    status: str
    database: str
    auth: str
    suggestions: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns 200 if the API is running.
    """
    return HealthResponse(status="healthy", version=get_settings().app_version)


@router.get("/ready", response_model=ReadinessResponse)
async def readiness_check() -> ReadinessResponse:
    """
    Readiness check endpoint.

    Reports whether each required setting is present; does not open
    connections.
    """
    settings = get_settings()
    database = "configured" if is_database_configured() else "missing"
    auth = "configured" if settings.jwt_secret else "missing"
    suggestions = "configured" if settings.google_api_key else "missing"
    ready = database == "configured" and auth == "configured"
    return ReadinessResponse(
        status="ready" if ready else "not_ready",
        database=database,
        auth=auth,
        suggestions=suggestions,
    )
