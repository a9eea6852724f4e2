"""
CodeDetails API package.

Provides the FastAPI application for project pages and tag moderation.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
