"""
Platewise API package.

Provides the FastAPI application for the Platewise meal planning service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
