"""Demo records for a fresh workspace.

Seeds are handed to the workspace by the caller and only fill collections
that have never been stored.
"""

from datetime import datetime, timedelta, timezone
from typing import Any

from studydesk.services.storage import (
    ASSIGNMENTS_KEY,
    NOTES_KEY,
    RESOURCES_KEY,
    SUBJECTS_KEY,
)


def demo_seed(now: datetime | None = None) -> dict[str, list[dict[str, Any]]]:
    """Demo collections keyed by storage key, in stored (camelCase) shape."""
    now = now or datetime.now(timezone.utc)
    day = timedelta(days=1)

    return {
        ASSIGNMENTS_KEY: [
            {
                "id": "1",
                "title": "Mathematics Assignment",
                "subject": "Calculus",
                "dueDate": "2024-02-15",
                "priority": "high",
                "status": "pending",
                "description": "Solve problems 1-10 from Chapter 5",
                "createdAt": now.isoformat(),
            },
            {
                "id": "2",
                "title": "History Essay",
                "subject": "World History",
                "dueDate": "2024-02-20",
                "priority": "medium",
                "status": "completed",
                "description": "Write about Industrial Revolution impact",
                "createdAt": now.isoformat(),
            },
        ],
        SUBJECTS_KEY: [
            {"id": "1", "name": "Mathematics", "credits": 4, "grade": "A"},
            {"id": "2", "name": "Physics", "credits": 3, "grade": "B+"},
        ],
        NOTES_KEY: [
            {
                "id": "1",
                "title": "Physics Lecture - Wave Motion",
                "content": "Key concepts: frequency, wavelength, amplitude. "
                "Remember to review interference patterns.",
                "type": "text",
                "createdAt": now.isoformat(),
                "tags": ["physics", "lecture"],
            },
            {
                "id": "2",
                "title": "Math Formula Notes",
                "content": "Integration by parts and substitution methods",
                "type": "text",
                "createdAt": (now - day).isoformat(),
                "tags": ["math", "formulas"],
            },
        ],
        RESOURCES_KEY: [
            {
                "id": "1",
                "title": "Khan Academy - Calculus",
                "description": "Complete calculus course with interactive exercises and video tutorials",
                "url": "https://khanacademy.org/calculus",
                "type": "video",
                "subject": "Mathematics",
                "rating": 5,
                "addedAt": now.isoformat(),
                "tags": ["calculus", "free", "interactive"],
            },
            {
                "id": "2",
                "title": "MIT OpenCourseWare - Physics",
                "description": "Free physics courses from MIT with lecture notes and problem sets",
                "url": "https://ocw.mit.edu/physics",
                "type": "document",
                "subject": "Physics",
                "rating": 5,
                "addedAt": (now - day).isoformat(),
                "tags": ["physics", "mit", "free"],
            },
            {
                "id": "3",
                "title": "Introduction to Algorithms (CLRS)",
                "description": "Comprehensive textbook covering algorithms and data structures",
                "url": "https://mitpress.mit.edu/books/introduction-algorithms",
                "type": "book",
                "subject": "Computer Science",
                "rating": 4,
                "addedAt": (now - 2 * day).isoformat(),
                "tags": ["algorithms", "textbook", "computer-science"],
            },
        ],
    }
