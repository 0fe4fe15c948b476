"""Pydantic schemas for records, input validation and derived statistics."""

from studydesk.schemas.assignments import (
    Assignment,
    AssignmentCreate,
    AssignmentStats,
    AssignmentUpdate,
)
from studydesk.schemas.subjects import Subject, SubjectCreate, SubjectStats, SubjectUpdate
from studydesk.schemas.notes import Note, NoteCreate, NoteStats, NoteUpdate
from studydesk.schemas.resources import (
    Resource,
    ResourceCreate,
    ResourceRating,
    ResourceStats,
    ResourceUpdate,
)

__all__ = [
    # Assignments
    "Assignment",
    "AssignmentCreate",
    "AssignmentStats",
    "AssignmentUpdate",
    # Subjects
    "Subject",
    "SubjectCreate",
    "SubjectStats",
    "SubjectUpdate",
    # Notes
    "Note",
    "NoteCreate",
    "NoteStats",
    "NoteUpdate",
    # Resources
    "Resource",
    "ResourceCreate",
    "ResourceRating",
    "ResourceStats",
    "ResourceUpdate",
]
