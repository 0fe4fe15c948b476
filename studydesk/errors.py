"""Error types shared by the stores, the GPA engine and the media adapter.

Nothing here is fatal: every error describes something the user can fix by
retrying with corrected input.
"""

from collections.abc import Iterable

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError


class StudyDeskError(Exception):
    """Base class for StudyDesk errors."""


class ValidationError(StudyDeskError):
    """Missing or invalid input. No mutation took place."""

    def __init__(self, fields: Iterable[str], message: str | None = None):
        self.fields = list(dict.fromkeys(fields))
        if message is None:
            message = "Please fill in all required fields: " + ", ".join(self.fields)
        self.message = message
        super().__init__(message)

    @classmethod
    def from_pydantic(
        cls, error: PydanticValidationError, schema: type[BaseModel] | None = None
    ) -> "ValidationError":
        """
        Collapse a pydantic error into the names of the offending fields.

        Aliases (dueDate) are reported under the attribute name (due_date)
        when the schema is known. Model-level errors are reported as __root__.
        """
        by_alias = {}
        if schema is not None:
            by_alias = {f.alias: name for name, f in schema.model_fields.items() if f.alias}
        fields = []
        messages = []
        for item in error.errors():
            loc = item.get("loc") or ("__root__",)
            name = by_alias.get(str(loc[0]), str(loc[0]))
            fields.append(name)
            messages.append(f"{name}: {item.get('msg')}")
        return cls(fields, "; ".join(messages))


class NotFoundError(StudyDeskError):
    """The operation targets an id that is not in the collection."""

    def __init__(self, kind: str, item_id: str):
        self.kind = kind
        self.item_id = item_id
        super().__init__(f"{kind} not found: {item_id}")


class MediaAccessError(StudyDeskError):
    """Microphone or file source is unavailable or permission was denied."""


class PersistenceWarning(UserWarning):
    """A storage write failed. The in-memory change still stands."""
