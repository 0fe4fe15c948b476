"""Key/value local storage backed by a single SQLite table."""

import json
import logging
import warnings
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from studydesk.db.models import StorageEntry
from studydesk.errors import PersistenceWarning

logger = logging.getLogger(__name__)

# Fixed keys, one JSON document per collection
ASSIGNMENTS_KEY = "assignments"
SUBJECTS_KEY = "subjects"
NOTES_KEY = "notes"
RESOURCES_KEY = "resources"


class LocalStorage:
    """
    Best-effort cache for JSON documents.

    Neither method raises on storage trouble:
    - load() falls back to the default when the key is absent, the stored
      text is not valid JSON, or the database cannot be read.
    - save() logs, emits a PersistenceWarning and returns False when the write
      fails. The caller's in-memory state is the source of truth.
    """

    def __init__(self, session_factory: sessionmaker[Session]):
        self._session_factory = session_factory

    def load(self, key: str, default: Any = None) -> Any:
        """Return the stored value for key, or default."""
        try:
            with self._session_factory() as session:
                raw = session.execute(
                    select(StorageEntry.value).where(StorageEntry.key == key)
                ).scalar_one_or_none()
        except SQLAlchemyError:
            logger.warning("Local storage unavailable while reading %r", key, exc_info=True)
            return default

        if raw is None:
            return default

        try:
            return json.loads(raw)
        except ValueError:
            logger.warning("Discarding corrupt document stored under %r", key)
            return default

    def save(self, key: str, value: Any) -> bool:
        """Serialize value and overwrite whatever is stored under key."""
        try:
            raw = json.dumps(value)
        except (TypeError, ValueError) as e:
            return self._write_failed(key, e)

        try:
            with self._session_factory() as session, session.begin():
                entry = session.get(StorageEntry, key)
                if entry is None:
                    session.add(StorageEntry(key=key, value=raw))
                else:
                    entry.value = raw
        except SQLAlchemyError as e:
            return self._write_failed(key, e)

        logger.debug("Saved %d bytes under %r", len(raw), key)
        return True

    def remove(self, key: str) -> bool:
        """Clear the document stored under key."""
        try:
            with self._session_factory() as session, session.begin():
                session.execute(delete(StorageEntry).where(StorageEntry.key == key))
        except SQLAlchemyError as e:
            return self._write_failed(key, e)
        return True

    def _write_failed(self, key: str, error: Exception) -> bool:
        logger.warning("Failed to persist %r: %s", key, error)
        warnings.warn(
            f"Could not persist {key!r}; changes are kept in memory only",
            PersistenceWarning,
            stacklevel=3,
        )
        return False
