"""StudyDesk: assignments, GPA, notes and study resources on local storage."""

__version__ = "0.1.0"
