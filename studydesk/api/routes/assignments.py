"""Assignment CRUD routes."""

from datetime import date

from fastapi import APIRouter, status

from studydesk.api.deps import Assignments
from studydesk.schemas.assignments import (
    Assignment,
    AssignmentCreate,
    AssignmentStats,
    AssignmentUpdate,
)

router = APIRouter(prefix="/assignments", tags=["assignments"])


@router.get("/", response_model=list[Assignment])
async def list_assignments(
    store: Assignments,
    status: str | None = None,
    subject: str | None = None,
) -> list[Assignment]:
    """
    List assignments, newest first.

    Filters:
    - status: pending or completed
    - subject: exact subject name
    """
    assignments = store.list()
    if status:
        assignments = [a for a in assignments if a.status == status]
    if subject:
        assignments = [a for a in assignments if a.subject == subject]
    return assignments


@router.get("/stats", response_model=AssignmentStats)
async def assignment_stats(store: Assignments, today: date | None = None) -> AssignmentStats:
    """Pending, completed, overdue and due-today counts."""
    return store.compute_stats(today)


@router.post("/", response_model=Assignment, status_code=status.HTTP_201_CREATED)
async def create_assignment(data: AssignmentCreate, store: Assignments) -> Assignment:
    """Create a new pending assignment."""
    return store.create(data)


@router.get("/{assignment_id}", response_model=Assignment)
async def get_assignment(assignment_id: str, store: Assignments) -> Assignment:
    """Get a specific assignment by ID."""
    return store.get(assignment_id)


@router.patch("/{assignment_id}", response_model=Assignment)
async def update_assignment(
    assignment_id: str,
    data: AssignmentUpdate,
    store: Assignments,
) -> Assignment:
    """Update an assignment."""
    return store.update(assignment_id, data)


@router.post("/{assignment_id}/toggle", response_model=Assignment)
async def toggle_assignment(assignment_id: str, store: Assignments) -> Assignment:
    """Flip an assignment between pending and completed."""
    return store.toggle_status(assignment_id)


@router.delete("/{assignment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_assignment(assignment_id: str, store: Assignments) -> None:
    """Delete an assignment. The client confirms before calling this."""
    store.delete(assignment_id)
