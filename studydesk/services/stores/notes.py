"""Quick notes store: text notes plus recorded audio and uploaded images."""

import base64
import mimetypes
from datetime import datetime, timezone

from studydesk.errors import ValidationError
from studydesk.schemas.notes import Note, NoteCreate, NoteStats, NoteUpdate
from studydesk.services.search import filter_notes
from studydesk.services.storage import NOTES_KEY
from studydesk.services.stores.base import CollectionStore, Payload, validate_input


def to_data_url(payload: bytes, mime_type: str) -> str:
    """Embed a binary payload so it survives in the JSON document."""
    encoded = base64.b64encode(payload).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


class NoteStore(CollectionStore[Note]):
    """Notes, newest first."""

    key = NOTES_KEY
    kind = "Note"
    record_type = Note

    def create(self, data: Payload) -> Note:
        """Add a text note. Title and content are required."""
        payload = validate_input(NoteCreate, data)
        return self._insert(Note(type="text", **payload.model_dump()))

    create_text = create

    def add_audio_note(
        self,
        payload: bytes,
        mime_type: str = "audio/wav",
        recorded_at: datetime | None = None,
    ) -> Note:
        """Wrap a finished recording into an audio note."""
        if not payload:
            raise ValidationError(["payload"], "Recording is empty")
        recorded_at = recorded_at or datetime.now(timezone.utc)
        record = validate_input(
            Note,
            {
                "title": f"Audio Note - {recorded_at.strftime('%H:%M:%S')}",
                "content": "Audio recording",
                "type": "audio",
                "created_at": recorded_at,
                "tags": ["audio"],
                "audio_url": to_data_url(payload, mime_type),
            },
        )
        return self._insert(record)

    def add_image_note(self, file_name: str, payload: bytes, mime_type: str | None = None) -> Note:
        """Wrap a selected image file into an image note."""
        file_name = (file_name or "").strip()
        if not file_name:
            raise ValidationError(["file_name"])
        if not payload:
            raise ValidationError(["payload"], "Image file is empty")
        mime_type = mime_type or mimetypes.guess_type(file_name)[0] or "application/octet-stream"
        # Over-long file names fail the title length check
        record = validate_input(
            Note,
            {
                "title": f"Image Note - {file_name}",
                "content": "Image attachment",
                "type": "image",
                "tags": ["image"],
                "image_url": to_data_url(payload, mime_type),
            },
        )
        return self._insert(record)

    def update(self, note_id: str, patch: Payload) -> Note:
        """Edit title and content of a text note. Media notes are read-only."""
        if self.get(note_id).type != "text":
            raise ValidationError(["type"], "Only text notes can be edited")
        return self._merge(note_id, NoteUpdate, patch)

    def search(self, term: str = "") -> list[Note]:
        return filter_notes(self._items, term)

    def compute_stats(self) -> NoteStats:
        counts = {"text": 0, "audio": 0, "image": 0}
        for note in self._items:
            counts[note.type] += 1
        return NoteStats(total=len(self._items), **counts)
