"""Note schemas."""

from datetime import datetime
from typing import Literal

from pydantic import Field, model_validator

from studydesk.schemas.base import BaseSchema, TagList, new_id, utcnow

NoteTypeType = Literal["text", "audio", "image"]


class NoteBase(BaseSchema):
    """Base note schema."""

    title: str = Field(..., min_length=1, max_length=255)
    content: str = ""
    tags: TagList = Field(default_factory=list)


class NoteCreate(NoteBase):
    """Schema for creating a text note. Title and content are both required."""

    content: str = Field(..., min_length=1)


class Note(NoteBase):
    """
    A stored note.

    The type decides which media reference is present:
    - text: neither audio_url nor image_url
    - audio: audio_url only
    - image: image_url only
    """

    id: str = Field(default_factory=new_id, min_length=1)
    type: NoteTypeType = "text"
    created_at: datetime = Field(default_factory=utcnow)
    audio_url: str | None = None
    image_url: str | None = None

    @model_validator(mode="after")
    def validate_media(self) -> "Note":
        """Ensure the media reference matches the note type."""
        has_audio = bool(self.audio_url)
        has_image = bool(self.image_url)
        if self.type == "text" and (has_audio or has_image):
            raise ValueError("text notes carry no media reference")
        if self.type == "audio" and (not has_audio or has_image):
            raise ValueError("audio notes need audio_url and no image_url")
        if self.type == "image" and (not has_image or has_audio):
            raise ValueError("image notes need image_url and no audio_url")
        return self


class NoteUpdate(BaseSchema):
    """Schema for editing a text note. Only title and content change."""

    title: str | None = Field(None, min_length=1, max_length=255)
    content: str | None = Field(None, min_length=1)


class NoteStats(BaseSchema):
    """Note counts by type."""

    total: int
    text: int
    audio: int
    image: int
