"""Assignment tracker store."""

from datetime import date

from studydesk.schemas.assignments import (
    Assignment,
    AssignmentCreate,
    AssignmentStats,
    AssignmentUpdate,
)
from studydesk.services.storage import ASSIGNMENTS_KEY
from studydesk.services.stores.base import CollectionStore, Payload, validate_input


def days_until_due(due_date: date, today: date | None = None) -> int:
    """Whole days from today to the due date: 0 today, negative once past."""
    today = today or date.today()
    return (due_date - today).days


def _plural(n: int) -> str:
    return "" if n == 1 else "s"


class AssignmentStore(CollectionStore[Assignment]):
    """Assignments, newest first."""

    key = ASSIGNMENTS_KEY
    kind = "Assignment"
    record_type = Assignment

    def create(self, data: Payload) -> Assignment:
        """Add a pending assignment. Title, subject and due date are required."""
        payload = validate_input(AssignmentCreate, data)
        return self._insert(Assignment(**payload.model_dump()))

    def update(self, assignment_id: str, patch: Payload) -> Assignment:
        return self._merge(assignment_id, AssignmentUpdate, patch)

    def toggle_status(self, assignment_id: str) -> Assignment:
        """Flip pending <-> completed."""
        current = self.get(assignment_id)
        new_status = "completed" if current.status == "pending" else "pending"
        return self._merge(assignment_id, AssignmentUpdate, {"status": new_status})

    def is_overdue(self, assignment: Assignment, today: date | None = None) -> bool:
        return assignment.status == "pending" and days_until_due(assignment.due_date, today) < 0

    def time_status(self, assignment: Assignment, today: date | None = None) -> str:
        """Human readable deadline label for one assignment."""
        if assignment.status == "completed":
            return "Completed"
        days = days_until_due(assignment.due_date, today)
        if days < 0:
            return f"Overdue by {-days} day{_plural(-days)}"
        if days == 0:
            return "Due today"
        return f"{days} day{_plural(days)} remaining"

    def compute_stats(self, today: date | None = None) -> AssignmentStats:
        today = today or date.today()
        pending = [a for a in self._items if a.status == "pending"]
        return AssignmentStats(
            total=len(self._items),
            pending=len(pending),
            completed=len(self._items) - len(pending),
            overdue=sum(1 for a in pending if days_until_due(a.due_date, today) < 0),
            due_today=sum(1 for a in pending if days_until_due(a.due_date, today) == 0),
        )
