"""
Projects module data models.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class ProjectDifficulty(str, Enum):
    """Difficulty levels a project can be labelled with."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Project(BaseModel):
    """A project with its resolved tag names."""

    id: str = Field(..., description="Project UUID")
    user_id: Optional[str] = Field(None, description="Clerk id of the project owner")
    title: str
    slug: str = Field(..., description="Unique, URL-safe identifier")
    description: Optional[str] = None
    difficulty: str = Field(default=ProjectDifficulty.BEGINNER.value)
    tags: list[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = Field(None, description="Set when soft-deleted")

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None
