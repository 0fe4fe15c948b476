"""Builds the four stores once and hands them out by reference."""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from studydesk.config import Settings
from studydesk.db.session import create_session_factory, create_storage_engine
from studydesk.services.storage import (
    ASSIGNMENTS_KEY,
    NOTES_KEY,
    RESOURCES_KEY,
    SUBJECTS_KEY,
    LocalStorage,
)
from studydesk.services.stores import AssignmentStore, NoteStore, ResourceStore, SubjectStore
from studydesk.services.stores.base import Payload

logger = logging.getLogger(__name__)

Seed = Mapping[str, Sequence[Payload]]


@dataclass
class Workspace:
    """All collections of one local workspace."""

    storage: LocalStorage
    assignments: AssignmentStore
    subjects: SubjectStore
    notes: NoteStore
    resources: ResourceStore

    @classmethod
    def open(cls, storage: LocalStorage, seed: Seed | None = None) -> "Workspace":
        """Load every collection from storage; seed only fills never-stored keys."""
        seed = seed or {}
        return cls(
            storage=storage,
            assignments=AssignmentStore(storage, seed.get(ASSIGNMENTS_KEY)),
            subjects=SubjectStore(storage, seed.get(SUBJECTS_KEY)),
            notes=NoteStore(storage, seed.get(NOTES_KEY)),
            resources=ResourceStore(storage, seed.get(RESOURCES_KEY)),
        )


def open_workspace(settings: Settings, seed: Seed | None = None) -> Workspace:
    """Open the workspace stored at settings.storage_path."""
    engine = create_storage_engine(settings.storage_url, echo=settings.debug)
    storage = LocalStorage(create_session_factory(engine))
    logger.info("Opened local storage at %s", settings.storage_path)
    return Workspace.open(storage, seed)
