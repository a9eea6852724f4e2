"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from shared.config import get_settings
from shared.logging_config import configure_logging
from .routes import health, users
from modules.auth.routes import router as webhook_router
from modules.projects.routes import router as projects_router
from modules.tag_submissions.routes import admin_router, project_router
from web.routes import router as dashboard_router
from web.templating import STATIC_DIR

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    settings = get_settings()
    logger.info(f"Starting {settings.app_name} on {settings.host}:{settings.port}")
    yield
    logger.info(f"Shutting down {settings.app_name}")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()
    configure_logging(settings.log_level, settings.debug)

    app = FastAPI(
        title=settings.app_name,
        description="Project catalogue and tag moderation API",
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
    )

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(users.router, prefix="/api/users", tags=["users"])
    app.include_router(projects_router, prefix="/api/projects", tags=["projects"])
    app.include_router(project_router, prefix="/api/projects", tags=["tag-submissions"])
    app.include_router(admin_router, prefix="/api/admin/tag-submissions", tags=["admin"])
    app.include_router(webhook_router, prefix="/api/webhook", tags=["webhooks"])
    app.include_router(dashboard_router, prefix="/dashboard", include_in_schema=False)

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    return app


# Application instance for uvicorn
app = create_app()
