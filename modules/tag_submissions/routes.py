"""
Tag submission API endpoints.

Two routers:
- project_router: submitter-facing endpoints under /api/projects
- admin_router: moderation endpoints under /api/admin/tag-submissions
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse

from api.dependencies import get_tag_submission_service
from api.middleware.auth import get_current_user, require_admin
from modules.projects.exceptions import ProjectNotFoundError
from shared.models import AuthenticatedUser

from .interfaces import ITagSubmissionService
from .models import (
    ApprovalResult,
    ApproveSubmissionRequest,
    RejectSubmissionRequest,
    SubmitTagRequest,
    SubmitTagResult,
    TagSubmission,
    TagSubmissionGroup,
    TagSubmissionStatus,
)
from .exceptions import (
    DuplicateTagSubmissionError,
    SubmissionAlreadyReviewedError,
    TagSubmissionNotFoundError,
)

logger = logging.getLogger(__name__)

project_router = APIRouter()
admin_router = APIRouter()


# -----------------------------------------------------------------------------
# Submitter endpoints
# -----------------------------------------------------------------------------


@project_router.get("/{project_id}/tag-submissions")
async def list_project_tag_submissions(
    project_id: str,
    email: Optional[str] = Query(default=None, description="Submitter email"),
    status: TagSubmissionStatus = Query(default=TagSubmissionStatus.PENDING),
    service: ITagSubmissionService = Depends(get_tag_submission_service),
):
    """
    List a submitter's tag submissions for a project.
    """
    if not email:
        return JSONResponse(status_code=400, content={"error": "Submitter email is required"})

    try:
        submissions = await service.list_project_submissions(project_id, email, status)
        return [s.model_dump(mode="json") for s in submissions]
    except Exception:
        logger.exception(f"Error fetching tag submissions for project {project_id}")
        return JSONResponse(status_code=500, content={"error": "Failed to fetch tag submissions"})


@project_router.post(
    "/{project_id}/tag-submissions",
    response_model=SubmitTagResult,
    status_code=201,
)
async def submit_tag(
    project_id: str,
    request: SubmitTagRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITagSubmissionService = Depends(get_tag_submission_service),
) -> SubmitTagResult:
    """
    Propose a tag for a project.

    Tags that already exist are attached right away; new tags go to the
    moderation queue.
    """
    if not user.email:
        raise HTTPException(status_code=400, detail="An email address is required to submit tags")

    try:
        return await service.submit_new_tag(project_id, user.email, request)
    except ProjectNotFoundError as e:
        raise HTTPException(status_code=e.status_code, detail="Project not found")
    except DuplicateTagSubmissionError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


# -----------------------------------------------------------------------------
# Admin endpoints
# -----------------------------------------------------------------------------


@admin_router.get("", response_model=list[TagSubmissionGroup])
async def list_pending_tag_submissions(
    admin: AuthenticatedUser = Depends(require_admin),
    service: ITagSubmissionService = Depends(get_tag_submission_service),
) -> list[TagSubmissionGroup]:
    """
    Get the moderation queue grouped by tag name.
    """
    return await service.get_pending_submissions()


@admin_router.post("/{submission_id}/approve", response_model=ApprovalResult)
async def approve_tag_submission(
    submission_id: str,
    request: Optional[ApproveSubmissionRequest] = None,
    admin: AuthenticatedUser = Depends(require_admin),
    service: ITagSubmissionService = Depends(get_tag_submission_service),
) -> ApprovalResult:
    """
    Approve a submission (and any other pending submissions for the same tag).
    """
    try:
        admin_notes = request.admin_notes if request else None
        return await service.approve_submission(submission_id, admin_notes)
    except TagSubmissionNotFoundError as e:
        raise HTTPException(status_code=e.status_code, detail="Submission not found")
    except SubmissionAlreadyReviewedError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@admin_router.post("/{submission_id}/reject", response_model=TagSubmission)
async def reject_tag_submission(
    submission_id: str,
    request: RejectSubmissionRequest,
    admin: AuthenticatedUser = Depends(require_admin),
    service: ITagSubmissionService = Depends(get_tag_submission_service),
) -> TagSubmission:
    """
    Reject a submission. Admin notes are required.
    """
    try:
        return await service.reject_submission(submission_id, request.admin_notes)
    except TagSubmissionNotFoundError as e:
        raise HTTPException(status_code=e.status_code, detail="Submission not found")
    except SubmissionAlreadyReviewedError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
