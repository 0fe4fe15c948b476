"""Media capture adapter: microphone recordings and image files become notes."""

import logging
from pathlib import Path
from typing import Protocol

from studydesk.errors import MediaAccessError
from studydesk.schemas.notes import Note
from studydesk.services.stores.notes import NoteStore

logger = logging.getLogger(__name__)


class CaptureHandle(Protocol):
    """An open capture on a host device."""

    def read(self) -> bytes: ...

    def close(self) -> None: ...


class AudioSource(Protocol):
    """Host microphone. open() raises PermissionError/OSError when unavailable."""

    mime_type: str

    def open(self) -> CaptureHandle: ...


class AudioRecorder:
    """
    One recording session at a time.

    stop() always releases the capture handle, whether or not the recording
    is kept. A kept recording becomes a single audio note.
    """

    def __init__(self, notes: NoteStore, source: AudioSource):
        self._notes = notes
        self._source = source
        self._handle: CaptureHandle | None = None

    @property
    def is_recording(self) -> bool:
        return self._handle is not None

    def start(self) -> None:
        if self._handle is not None:
            return
        try:
            self._handle = self._source.open()
        except OSError as e:
            logger.warning("Could not open audio source: %s", e)
            raise MediaAccessError(
                "Could not access microphone. Please check permissions."
            ) from e
        logger.info("Recording started")

    def stop(self, keep: bool = True) -> Note | None:
        """Finish the recording. Returns the new note, or None if discarded or idle."""
        if self._handle is None:
            return None
        handle, self._handle = self._handle, None
        try:
            payload = handle.read() if keep else b""
        finally:
            handle.close()
        if not keep:
            logger.info("Recording discarded")
            return None
        return self._notes.add_audio_note(payload, self._source.mime_type)

    def toggle(self) -> Note | None:
        if self.is_recording:
            return self.stop()
        self.start()
        return None


def import_image(notes: NoteStore, path: Path, mime_type: str | None = None) -> Note:
    """Read an image file from disk and store it as an image note."""
    try:
        payload = Path(path).read_bytes()
    except OSError as e:
        raise MediaAccessError(f"Could not read image file: {path}") from e
    return notes.add_image_note(Path(path).name, payload, mime_type)
