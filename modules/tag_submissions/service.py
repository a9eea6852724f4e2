"""
Tag submission service implementation.

Implements the moderation workflow on top of the submission, tag and
project repositories.
"""

import logging
from typing import Optional

from modules.projects.exceptions import ProjectNotFoundError
from modules.projects.repository import ProjectRepository

from .interfaces import ITagSubmissionService
from .models import (
    AUTO_APPROVAL_NOTE,
    ApprovalResult,
    SubmissionOutcome,
    SubmitTagRequest,
    SubmitTagResult,
    TagSubmission,
    TagSubmissionGroup,
    TagSubmissionStatus,
    normalize_tag_name,
)
from .repository import TagRepository, TagSubmissionRepository
from .exceptions import (
    DuplicateTagSubmissionError,
    SubmissionAlreadyReviewedError,
    TagSubmissionNotFoundError,
)

logger = logging.getLogger(__name__)


def group_by_tag_name(submissions: list[TagSubmission]) -> list[TagSubmissionGroup]:
    """
    Group submissions by normalized tag name.

    Groups keep the order in which each tag name is first seen, and
    submissions keep their input order within a group.
    """
    groups: dict[str, TagSubmissionGroup] = {}

    for submission in submissions:
        key = normalize_tag_name(submission.tag_name)
        group = groups.get(key)
        if group is None:
            group = TagSubmissionGroup(tag_name=key)
            groups[key] = group
        group.count += 1
        group.submissions.append(submission)

    return list(groups.values())


class TagSubmissionService(ITagSubmissionService):
    """
    Tag submission service with Supabase backend.
    """

    def __init__(
        self,
        submissions: TagSubmissionRepository,
        tags: TagRepository,
        projects: ProjectRepository,
    ):
        self._submissions = submissions
        self._tags = tags
        self._projects = projects

    async def get_pending_submissions(self) -> list[TagSubmissionGroup]:
        """Fetch pending submissions grouped by tag name."""
        pending = self._submissions.list_by_status(TagSubmissionStatus.PENDING)
        return group_by_tag_name(pending)

    async def submit_new_tag(
        self,
        project_id: str,
        submitter_email: str,
        request: SubmitTagRequest,
    ) -> SubmitTagResult:
        """Attach an existing tag or queue a new one for review."""
        tag_name = normalize_tag_name(request.tag_name)

        if self._projects.get_by_id(project_id) is None:
            raise ProjectNotFoundError(project_id)

        tag_id = self._tags.get_id_by_name(tag_name)
        if tag_id is not None:
            if not self._tags.add_to_project(project_id, tag_id):
                return SubmitTagResult(
                    status=SubmissionOutcome.AUTO_APPROVED,
                    tag_name=tag_name,
                    message="This project already has this tag",
                )

            logger.info(f"Tag '{tag_name}' already exists, attached to project {project_id}")
            return SubmitTagResult(
                status=SubmissionOutcome.AUTO_APPROVED,
                tag_name=tag_name,
                message="Tag already exists and has been added to your project",
            )

        if self._submissions.find_pending(project_id, tag_name, submitter_email) is not None:
            raise DuplicateTagSubmissionError(tag_name, project_id)

        submission = self._submissions.create({
            "tag_name": tag_name,
            "project_id": project_id,
            "submitter_email": submitter_email,
            "description": request.description,
        })
        logger.info(f"Queued tag submission '{tag_name}' for project {project_id}")

        return SubmitTagResult(
            status=SubmissionOutcome.PENDING,
            tag_name=tag_name,
            submission=submission,
        )

    async def approve_submission(
        self,
        submission_id: str,
        admin_notes: Optional[str] = None,
    ) -> ApprovalResult:
        """Approve a submission and every other pending one for the same tag."""
        submission = self._get_pending(submission_id)
        tag_name = normalize_tag_name(submission.tag_name)
        tag_id = self._tags.get_or_create(tag_name)

        others = self._submissions.list_pending_for_tag(tag_name, exclude_id=submission_id)

        approved = self._submissions.set_review(
            submission_id, TagSubmissionStatus.APPROVED, admin_notes
        )
        if approved is None:
            raise TagSubmissionNotFoundError(submission_id)

        if submission.project_id:
            self._tags.add_to_project(submission.project_id, tag_id)

        auto_approved = []
        for other in others:
            self._submissions.set_review(
                other.id, TagSubmissionStatus.APPROVED, AUTO_APPROVAL_NOTE
            )
            if other.project_id:
                self._tags.add_to_project(other.project_id, tag_id)
            auto_approved.append(other.id)

        logger.info(
            f"Approved tag '{tag_name}' (submission {submission_id}, "
            f"{len(auto_approved)} auto-approved)"
        )
        return ApprovalResult(submission=approved, tag_id=tag_id, auto_approved=auto_approved)

    async def reject_submission(
        self,
        submission_id: str,
        admin_notes: str,
    ) -> TagSubmission:
        """Reject a pending submission."""
        self._get_pending(submission_id)

        rejected = self._submissions.set_review(
            submission_id, TagSubmissionStatus.REJECTED, admin_notes
        )
        if rejected is None:
            raise TagSubmissionNotFoundError(submission_id)

        logger.info(f"Rejected tag submission {submission_id}")
        return rejected

    async def list_project_submissions(
        self,
        project_id: str,
        submitter_email: str,
        status: TagSubmissionStatus = TagSubmissionStatus.PENDING,
    ) -> list[TagSubmission]:
        """List a submitter's submissions for a project."""
        return self._submissions.list_for_project(project_id, submitter_email, status)

    def _get_pending(self, submission_id: str) -> TagSubmission:
        submission = self._submissions.get_by_id(submission_id)
        if submission is None:
            raise TagSubmissionNotFoundError(submission_id)
        if submission.status != TagSubmissionStatus.PENDING:
            raise SubmissionAlreadyReviewedError(submission_id, submission.status.value)
        return submission
