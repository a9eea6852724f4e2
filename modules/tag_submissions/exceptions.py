"""
Tag submissions module exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError


class TagSubmissionNotFoundError(NotFoundError):
    """Raised when a submission ID does not exist."""

    def __init__(self, submission_id: str):
        super().__init__(
            f"Submission not found: {submission_id}",
            code="TAG_SUBMISSION_NOT_FOUND",
            details={"submission_id": submission_id},
        )


class DuplicateTagSubmissionError(ConflictError):
    """Raised when the submitter already has this tag pending for the project."""

    def __init__(self, tag_name: str, project_id: str):
        super().__init__(
            "You already have a pending submission for this tag",
            code="DUPLICATE_TAG_SUBMISSION",
            details={"tag_name": tag_name, "project_id": project_id},
        )


class SubmissionAlreadyReviewedError(ConflictError):
    """Raised when reviewing a submission that is no longer pending."""

    def __init__(self, submission_id: str, status: str):
        super().__init__(
            f"Submission {submission_id} was already {status}",
            code="TAG_SUBMISSION_ALREADY_REVIEWED",
            details={"submission_id": submission_id, "status": status},
        )
