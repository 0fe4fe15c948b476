"""Entity stores: one exclusively owned collection each."""

from studydesk.services.stores.assignments import AssignmentStore, days_until_due
from studydesk.services.stores.base import CollectionStore
from studydesk.services.stores.notes import NoteStore
from studydesk.services.stores.resources import ResourceStore
from studydesk.services.stores.subjects import SubjectStore

__all__ = [
    "AssignmentStore",
    "CollectionStore",
    "NoteStore",
    "ResourceStore",
    "SubjectStore",
    "days_until_due",
]
