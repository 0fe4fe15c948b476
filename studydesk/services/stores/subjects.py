"""Subject store for the CGPA calculator."""

from studydesk.schemas.subjects import Subject, SubjectCreate, SubjectStats, SubjectUpdate
from studydesk.services.gpa import CGPAResult, compute_cgpa
from studydesk.services.storage import SUBJECTS_KEY
from studydesk.services.stores.base import CollectionStore, Payload, validate_input


class SubjectStore(CollectionStore[Subject]):
    """Subjects in the order they were added."""

    key = SUBJECTS_KEY
    kind = "Subject"
    record_type = Subject
    newest_first = False

    def create(self, data: Payload) -> Subject:
        """Add a subject. Grade points always come from the grade table."""
        payload = validate_input(SubjectCreate, data)
        return self._insert(Subject(**payload.model_dump()))

    def update(self, subject_id: str, patch: Payload) -> Subject:
        """Replace the subject with a rebuilt record; grade points are recomputed."""
        return self._merge(subject_id, SubjectUpdate, patch)

    def compute_cgpa(self) -> CGPAResult:
        return compute_cgpa(self._items)

    def compute_stats(self) -> SubjectStats:
        cgpa = self.compute_cgpa()
        return SubjectStats(
            subject_count=len(self._items),
            total_credits=cgpa.total_credits,
            cgpa=cgpa,
        )
