"""
Tag submissions module data models.

A tag submission is a user's proposal to attach a new tag to a project.
It waits in the moderation queue until an administrator reviews it.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, field_validator


MIN_TAG_NAME_LENGTH = 2
MAX_TAG_NAME_LENGTH = 50
MAX_TAG_DESCRIPTION_LENGTH = 500
MAX_ADMIN_NOTES_LENGTH = 500

AUTO_APPROVAL_NOTE = "Automatically approved as tag was approved for another submission"


def normalize_tag_name(tag_name: str) -> str:
    """Canonical form of a tag name: trimmed and lower-cased."""
    return tag_name.strip().lower()


class TagSubmissionStatus(str, Enum):
    """Moderation state of a submission."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class SubmissionOutcome(str, Enum):
    """Result of submitting a tag."""

    AUTO_APPROVED = "auto_approved"  # Tag already existed and is now on the project
    PENDING = "pending"              # Queued for moderation


class TagSubmission(BaseModel):
    """A single moderation-queue record."""

    id: str
    project_id: Optional[str] = None
    tag_name: str
    submitter_email: str
    description: Optional[str] = None
    status: TagSubmissionStatus = TagSubmissionStatus.PENDING
    admin_notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    reviewed_at: Optional[datetime] = None


class TagSubmissionGroup(BaseModel):
    """Pending submissions that propose the same (normalized) tag name."""

    tag_name: str
    count: int = 0
    submissions: list[TagSubmission] = Field(default_factory=list)


class SubmitTagRequest(BaseModel):
    """Request to propose a tag for a project."""

    tag_name: str = Field(..., description="Proposed tag name")
    description: Optional[str] = Field(
        None,
        max_length=MAX_TAG_DESCRIPTION_LENGTH,
        description="Why the tag fits the project",
    )

    @field_validator("tag_name")
    @classmethod
    def validate_tag_name(cls, value: str) -> str:
        normalized = normalize_tag_name(value)
        if len(normalized) < MIN_TAG_NAME_LENGTH:
            raise ValueError(f"Tag name must be at least {MIN_TAG_NAME_LENGTH} characters")
        if len(normalized) > MAX_TAG_NAME_LENGTH:
            raise ValueError(f"Tag name must be at most {MAX_TAG_NAME_LENGTH} characters")
        return normalized

    @field_validator("description")
    @classmethod
    def strip_description(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return value.strip() or None


class SubmitTagResult(BaseModel):
    """Outcome of a tag submission."""

    status: SubmissionOutcome
    tag_name: str
    message: Optional[str] = None
    submission: Optional[TagSubmission] = None


class ApproveSubmissionRequest(BaseModel):
    """Admin approval with optional notes."""

    admin_notes: Optional[str] = Field(None, max_length=MAX_ADMIN_NOTES_LENGTH)


class RejectSubmissionRequest(BaseModel):
    """Admin rejection; a reason is required."""

    admin_notes: str = Field(..., min_length=1, max_length=MAX_ADMIN_NOTES_LENGTH)


class ApprovalResult(BaseModel):
    """Approved submission plus any pending submissions approved alongside it."""

    submission: TagSubmission
    tag_id: str
    auto_approved: list[str] = Field(
        default_factory=list,
        description="IDs of other pending submissions approved for the same tag",
    )
