"""
Recipe Share API package.

Provides the FastAPI application for the recipe sharing service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
