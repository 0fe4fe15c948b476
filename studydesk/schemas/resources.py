"""Study resource schemas."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from studydesk.schemas.base import BaseSchema, TagList, new_id, utcnow

ResourceTypeType = Literal["book", "video", "document", "website"]


class ResourceBase(BaseSchema):
    """Base resource schema."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str = ""
    url: str = Field(..., min_length=1, max_length=2048)
    type: ResourceTypeType = "website"
    subject: str = Field(..., min_length=1, max_length=255)
    tags: TagList = Field(default_factory=list)


class ResourceCreate(ResourceBase):
    """Schema for adding a resource. New resources start unrated."""

    pass


class Resource(ResourceBase):
    """A stored resource."""

    id: str = Field(default_factory=new_id, min_length=1)
    rating: int = Field(0, ge=0, le=5)
    added_at: datetime = Field(default_factory=utcnow)


class ResourceUpdate(BaseSchema):
    """Schema for editing a resource. Rating and type are not editable here."""

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    url: str | None = Field(None, min_length=1, max_length=2048)
    subject: str | None = Field(None, min_length=1, max_length=255)
    tags: TagList | None = None


class ResourceRating(BaseSchema):
    """Star rating set by the user."""

    rating: int = Field(..., ge=1, le=5)


class ResourceStats(BaseSchema):
    """Counters shown above the resource list."""

    total: int
    high_rated: int
    videos: int
    subjects: int
