"""
Tag submissions module.

Handles the tag moderation queue: users propose tags for projects,
administrators approve or reject them.

Public API:
- ITagSubmissionService: Interface for the moderation workflow
- TagSubmission / TagSubmissionGroup: Queue records and per-tag groups
- Tag submission exceptions
"""

from .interfaces import ITagSubmissionService
from .models import (
    TagSubmission,
    TagSubmissionGroup,
    TagSubmissionStatus,
    SubmissionOutcome,
    SubmitTagRequest,
    SubmitTagResult,
    ApprovalResult,
    normalize_tag_name,
)
from .exceptions import (
    TagSubmissionNotFoundError,
    DuplicateTagSubmissionError,
    SubmissionAlreadyReviewedError,
)

__all__ = [
    # Interface
    "ITagSubmissionService",
    # Models
    "TagSubmission",
    "TagSubmissionGroup",
    "TagSubmissionStatus",
    "SubmissionOutcome",
    "SubmitTagRequest",
    "SubmitTagResult",
    "ApprovalResult",
    "normalize_tag_name",
    # Exceptions
    "TagSubmissionNotFoundError",
    "DuplicateTagSubmissionError",
    "SubmissionAlreadyReviewedError",
]
