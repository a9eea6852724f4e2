"""
Tag submissions module interface.

The admin dashboard and the API layer depend on ITagSubmissionService.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import (
    ApprovalResult,
    SubmitTagRequest,
    SubmitTagResult,
    TagSubmission,
    TagSubmissionGroup,
    TagSubmissionStatus,
)


@runtime_checkable
class ITagSubmissionService(Protocol):
    """
    Interface for the tag moderation workflow.
    """

    async def get_pending_submissions(self) -> list[TagSubmissionGroup]:
        """
        Fetch the moderation queue.

        Pending submissions, oldest first, grouped by normalized tag name.
        Errors from the data layer are not caught.

        Returns:
            One group per distinct tag name, in first-seen order
        """
        ...

    async def submit_new_tag(
        self,
        project_id: str,
        submitter_email: str,
        request: SubmitTagRequest,
    ) -> SubmitTagResult:
        """
        Propose a tag for a project.

        Existing tags are attached immediately (AUTO_APPROVED); new tag
        names are queued for moderation (PENDING).

        Raises:
            ProjectNotFoundError: If the project does not exist
            DuplicateTagSubmissionError: If the same submitter already has
                this tag pending for the project
        """
        ...

    async def approve_submission(
        self,
        submission_id: str,
        admin_notes: Optional[str] = None,
    ) -> ApprovalResult:
        """
        Approve a submission.

        Creates the tag if needed, attaches it to the project, and approves
        every other pending submission for the same tag.

        Raises:
            TagSubmissionNotFoundError: If the submission does not exist
            SubmissionAlreadyReviewedError: If it is no longer pending
        """
        ...

    async def reject_submission(
        self,
        submission_id: str,
        admin_notes: str,
    ) -> TagSubmission:
        """
        Reject a submission with a reason.

        Raises:
            TagSubmissionNotFoundError: If the submission does not exist
            SubmissionAlreadyReviewedError: If it is no longer pending
        """
        ...

    async def list_project_submissions(
        self,
        project_id: str,
        submitter_email: str,
        status: TagSubmissionStatus = TagSubmissionStatus.PENDING,
    ) -> list[TagSubmission]:
        """
        List a submitter's submissions for one project.
        """
        ...
