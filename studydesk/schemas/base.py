"""Base schema configuration."""

from datetime import datetime, timezone
from typing import Annotated, Any
from uuid import uuid4

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


def new_id() -> str:
    """Fresh unique id for a stored record."""
    return uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def parse_tags(value: Any) -> Any:
    """Accept tags as a list or as one comma separated string."""
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    if isinstance(value, (list, tuple)):
        return [t.strip() for t in value if isinstance(t, str) and t.strip()]
    return value


TagList = Annotated[list[str], BeforeValidator(parse_tags)]


class BaseSchema(BaseModel):
    """Base schema with common configuration.

    Attributes are snake_case in Python; stored documents and HTTP payloads
    use the camelCase aliases (dueDate, createdAt, gradePoints, ...).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        validate_assignment=True,
    )

    def to_document(self) -> dict[str, Any]:
        """JSON-ready dict in the stored (camelCase) shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
