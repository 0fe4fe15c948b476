"""Subject schemas for the CGPA calculator."""

from typing import Literal

from pydantic import Field, model_validator

from studydesk.schemas.base import BaseSchema, new_id
from studydesk.services.gpa import GRADE_POINTS, CGPAResult

GradeType = Literal["A+", "A", "A-", "B+", "B", "B-", "C+", "C", "C-", "D+", "D", "F"]


class SubjectBase(BaseSchema):
    """Base subject schema."""

    name: str = Field(..., min_length=1, max_length=255)
    credits: int = Field(..., ge=1, le=6)
    grade: GradeType = "A"


class SubjectCreate(SubjectBase):
    """Schema for adding a subject to the calculation."""

    pass


class Subject(SubjectBase):
    """
    A stored subject.

    grade_points is derived from grade on every validation, so a stored or
    submitted value can never disagree with the grade table.
    """

    id: str = Field(default_factory=new_id, min_length=1)
    grade_points: float = 0.0

    @model_validator(mode="before")
    @classmethod
    def derive_grade_points(cls, data):
        """Overwrite any supplied grade points with the table value."""
        if isinstance(data, dict):
            data = dict(data)
            data.pop("gradePoints", None)
            grade = data.get("grade", "A")
            # Unknown grades fail the Literal check on the grade field itself
            data["grade_points"] = GRADE_POINTS.get(grade, 0.0) if isinstance(grade, str) else 0.0
        return data


class SubjectUpdate(BaseSchema):
    """Schema for replacing a subject's editable fields. All fields optional."""

    name: str | None = Field(None, min_length=1, max_length=255)
    credits: int | None = Field(None, ge=1, le=6)
    grade: GradeType | None = None


class SubjectStats(BaseSchema):
    """Counters shown beside the CGPA."""

    subject_count: int
    total_credits: int
    cgpa: CGPAResult
