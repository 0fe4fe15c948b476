"""Assignment schemas."""

from datetime import date, datetime
from typing import Literal

from pydantic import Field

from studydesk.schemas.base import BaseSchema, new_id, utcnow

# Type aliases for enums (used as literals for validation)
PriorityType = Literal["low", "medium", "high"]
AssignmentStatusType = Literal["pending", "completed"]


class AssignmentBase(BaseSchema):
    """Base assignment schema."""

    title: str = Field(..., min_length=1, max_length=255)
    subject: str = Field(..., min_length=1, max_length=255)
    due_date: date
    priority: PriorityType = "medium"
    description: str = ""


class AssignmentCreate(AssignmentBase):
    """Schema for creating an assignment. New assignments always start pending."""

    pass


class Assignment(AssignmentBase):
    """A stored assignment."""

    id: str = Field(default_factory=new_id, min_length=1)
    status: AssignmentStatusType = "pending"
    created_at: datetime = Field(default_factory=utcnow)


class AssignmentUpdate(BaseSchema):
    """Schema for updating an assignment. All fields optional."""

    title: str | None = Field(None, min_length=1, max_length=255)
    subject: str | None = Field(None, min_length=1, max_length=255)
    due_date: date | None = None
    priority: PriorityType | None = None
    status: AssignmentStatusType | None = None
    description: str | None = None


class AssignmentStats(BaseSchema):
    """Counters shown above the assignment list."""

    total: int
    pending: int
    completed: int
    overdue: int
    due_today: int
