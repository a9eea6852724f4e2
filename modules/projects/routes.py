"""
Project API endpoints.

Error bodies use the flat ``{"error": "<message>"}`` shape that the
frontend reads.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_project_service

from .interfaces import IProjectService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/slug/{slug}")
async def get_project_by_slug(
    slug: str,
    service: IProjectService = Depends(get_project_service),
):
    """
    Get a project by slug.

    Returns 200 with the project, 404 when no project has this slug,
    and 500 when the lookup fails.
    """
    try:
        project = await service.get_project_by_slug(slug)

        if project is None:
            return JSONResponse(status_code=404, content={"error": "Project not found"})

        return JSONResponse(status_code=200, content=project.model_dump(mode="json"))
    except Exception:
        logger.exception(f"Error fetching project by slug '{slug}'")
        return JSONResponse(status_code=500, content={"error": "Failed to fetch project"})
