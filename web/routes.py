"""
Server-rendered admin dashboard pages.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from api.dependencies import get_tag_submission_service
from api.middleware.auth import require_admin
from modules.tag_submissions.interfaces import ITagSubmissionService
from shared.models import AuthenticatedUser

from .templating import templates

router = APIRouter()

NO_STORE = {"Cache-Control": "no-store"}


@router.get("/tag-submissions", response_class=HTMLResponse)
async def tag_submissions_page(
    request: Request,
    admin: AuthenticatedUser = Depends(require_admin),
    service: ITagSubmissionService = Depends(get_tag_submission_service),
):
    """
    Tag moderation page.

    Fetches the pending queue on every request and renders it, embedding
    the same data as JSON initial state for the client-side controls.
    """
    groups = await service.get_pending_submissions()

    return templates.TemplateResponse(
        request,
        "tag_submissions.html",
        {
            "title": "Tag Submissions",
            "admin": admin,
            "groups": groups,
            "initial_state": [g.model_dump(mode="json") for g in groups],
        },
        headers=NO_STORE,
    )
