"""Tests for the notes store."""

import base64

import pytest

from studydesk.errors import NotFoundError, ValidationError
from studydesk.services.stores import NoteStore


@pytest.fixture
def store(storage) -> NoteStore:
    return NoteStore(storage)


def test_create_text_note(store):
    note = store.create({"title": "Wave Motion", "content": "frequency", "tags": "physics, lecture, "})

    assert note.type == "text"
    assert note.tags == ["physics", "lecture"]
    assert note.audio_url is None
    assert note.image_url is None


def test_text_note_requires_title_and_content(store):
    with pytest.raises(ValidationError) as exc_info:
        store.create({"title": " ", "content": ""})
    assert set(exc_info.value.fields) == {"title", "content"}
    assert store.list() == []


def test_audio_note(store):
    note = store.add_audio_note(b"RIFF....WAVE")

    assert note.type == "audio"
    assert note.title.startswith("Audio Note - ")
    assert note.content == "Audio recording"
    assert note.tags == ["audio"]
    assert note.image_url is None
    prefix, encoded = note.audio_url.split(",", 1)
    assert prefix == "data:audio/wav;base64"
    assert base64.b64decode(encoded) == b"RIFF....WAVE"


def test_image_note_guesses_mime_type(store):
    note = store.add_image_note("board.png", b"\x89PNG")

    assert note.type == "image"
    assert note.title == "Image Note - board.png"
    assert note.content == "Image attachment"
    assert note.tags == ["image"]
    assert note.audio_url is None
    assert note.image_url.startswith("data:image/png;base64,")


def test_image_note_with_overlong_file_name_is_rejected(store):
    with pytest.raises(ValidationError) as exc_info:
        store.add_image_note("a" * 300 + ".png", b"\x89PNG")

    assert exc_info.value.fields == ["title"]
    assert store.list() == []


def test_empty_media_payload_is_rejected(store):
    with pytest.raises(ValidationError):
        store.add_audio_note(b"")
    with pytest.raises(ValidationError):
        store.add_image_note("photo.jpg", b"")
    assert store.list() == []


def test_newest_first(store):
    text = store.create({"title": "First", "content": "a"})
    audio = store.add_audio_note(b"data")
    assert store.list() == [audio, text]


def test_edit_text_note_title_and_content(store):
    note = store.create({"title": "Draft", "content": "old", "tags": ["x"]})

    updated = store.update(note.id, {"title": "Final", "content": "new"})

    assert (updated.title, updated.content, updated.tags) == ("Final", "new", ["x"])


def test_media_notes_are_not_editable(store):
    note = store.add_image_note("scan.jpg", b"jpeg")

    with pytest.raises(ValidationError) as exc_info:
        store.update(note.id, {"title": "Renamed"})

    assert exc_info.value.fields == ["type"]
    assert store.get(note.id).title == "Image Note - scan.jpg"


def test_edit_rejects_blank_fields(store):
    note = store.create({"title": "Draft", "content": "old"})
    with pytest.raises(ValidationError):
        store.update(note.id, {"content": "  "})


def test_search(store):
    physics = store.create({"title": "Wave Motion", "content": "amplitude", "tags": ["physics"]})
    math = store.create({"title": "Formulas", "content": "Integration by parts", "tags": ["math"]})

    assert store.search("") == [math, physics]
    assert store.search("PHYSICS") == [physics]
    assert store.search("integration") == [math]


def test_stats(store):
    store.create({"title": "a", "content": "b"})
    store.add_audio_note(b"x")
    store.add_image_note("y.gif", b"y")
    store.add_image_note("z.gif", b"z")

    stats = store.compute_stats()
    assert (stats.total, stats.text, stats.audio, stats.image) == (4, 1, 1, 2)


def test_delete_unknown(store):
    with pytest.raises(NotFoundError):
        store.delete("nope")


def test_notes_survive_reload(store, storage):
    store.create({"title": "Keep", "content": "me"})
    store.add_audio_note(b"sound")

    stored = storage.load("notes")
    assert "audioUrl" in stored[0]
    assert "audioUrl" not in stored[1]
    assert NoteStore(storage).list() == store.list()


def test_stored_note_with_mismatched_media_is_skipped(storage):
    storage.save(
        "notes",
        [
            {"id": "1", "title": "Bad", "content": "", "type": "audio", "tags": []},
            {"id": "2", "title": "Good", "content": "ok", "type": "text", "tags": []},
        ],
    )
    assert [n.id for n in NoteStore(storage).list()] == ["2"]
