"""API routes package."""

from studydesk.api.routes import (
    assignments,
    notes,
    resources,
    subjects,
)

__all__ = [
    "assignments",
    "notes",
    "resources",
    "subjects",
]
