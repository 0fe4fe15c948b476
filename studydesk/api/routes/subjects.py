"""CGPA calculator routes."""

from fastapi import APIRouter, status

from studydesk.api.deps import Subjects
from studydesk.schemas.subjects import Subject, SubjectCreate, SubjectStats, SubjectUpdate
from studydesk.services.gpa import GRADE_POINTS, CGPAResult

router = APIRouter(prefix="/subjects", tags=["subjects"])


@router.get("/", response_model=list[Subject])
async def list_subjects(store: Subjects) -> list[Subject]:
    """List subjects in the order they were added."""
    return store.list()


@router.get("/grades")
async def grade_table() -> dict[str, float]:
    """Letter grade to grade point table."""
    return GRADE_POINTS


@router.get("/cgpa", response_model=CGPAResult)
async def get_cgpa(store: Subjects) -> CGPAResult:
    """Credit-weighted CGPA with its status label."""
    return store.compute_cgpa()


@router.get("/stats", response_model=SubjectStats)
async def subject_stats(store: Subjects) -> SubjectStats:
    return store.compute_stats()


@router.post("/", response_model=Subject, status_code=status.HTTP_201_CREATED)
async def create_subject(data: SubjectCreate, store: Subjects) -> Subject:
    """Add a subject to the calculation."""
    return store.create(data)


@router.patch("/{subject_id}", response_model=Subject)
async def update_subject(subject_id: str, data: SubjectUpdate, store: Subjects) -> Subject:
    """Replace a subject's name, credits or grade."""
    return store.update(subject_id, data)


@router.delete("/{subject_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_subject(subject_id: str, store: Subjects) -> None:
    """Remove a subject from the calculation."""
    store.delete(subject_id)
