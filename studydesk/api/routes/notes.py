"""Notes CRUD routes."""

from typing import Annotated

from fastapi import APIRouter, Header, Query, Request, status

from studydesk.api.deps import Notes
from studydesk.schemas.notes import Note, NoteCreate, NoteStats, NoteUpdate

router = APIRouter(prefix="/notes", tags=["notes"])


@router.get("/", response_model=list[Note], response_model_exclude_none=True)
async def list_notes(store: Notes, q: str = "") -> list[Note]:
    """
    List notes, newest first.

    - q: search in title, content and tags (case-insensitive)
    """
    return store.search(q)


@router.get("/stats", response_model=NoteStats)
async def note_stats(store: Notes) -> NoteStats:
    return store.compute_stats()


@router.post(
    "/",
    response_model=Note,
    status_code=status.HTTP_201_CREATED,
    response_model_exclude_none=True,
)
async def create_note(data: NoteCreate, store: Notes) -> Note:
    """Create a text note."""
    return store.create(data)


@router.post(
    "/audio",
    response_model=Note,
    status_code=status.HTTP_201_CREATED,
    response_model_exclude_none=True,
)
async def create_audio_note(
    request: Request,
    store: Notes,
    content_type: Annotated[str, Header()] = "audio/wav",
) -> Note:
    """Store a finished recording. The request body is the raw audio."""
    payload = await request.body()
    return store.add_audio_note(payload, content_type)


@router.post(
    "/image",
    response_model=Note,
    status_code=status.HTTP_201_CREATED,
    response_model_exclude_none=True,
)
async def create_image_note(
    request: Request,
    store: Notes,
    file_name: Annotated[str, Query(alias="fileName")],
    content_type: Annotated[str | None, Header()] = None,
) -> Note:
    """Store an uploaded image. The request body is the raw file."""
    payload = await request.body()
    # Generic uploads fall back to a type guessed from the file name
    if content_type == "application/octet-stream":
        content_type = None
    return store.add_image_note(file_name, payload, content_type)


@router.get("/{note_id}", response_model=Note, response_model_exclude_none=True)
async def get_note(note_id: str, store: Notes) -> Note:
    """Get a specific note by ID."""
    return store.get(note_id)


@router.patch("/{note_id}", response_model=Note, response_model_exclude_none=True)
async def update_note(note_id: str, data: NoteUpdate, store: Notes) -> Note:
    """Edit a text note's title and content."""
    return store.update(note_id, data)


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(note_id: str, store: Notes) -> None:
    """Delete a note."""
    store.delete(note_id)
