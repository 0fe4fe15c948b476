"""Grade point lookup and credit-weighted CGPA."""

from collections.abc import Iterable
from typing import Literal, Protocol

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from studydesk.errors import ValidationError

GRADE_POINTS: dict[str, float] = {
    "A+": 4.0,
    "A": 4.0,
    "A-": 3.7,
    "B+": 3.3,
    "B": 3.0,
    "B-": 2.7,
    "C+": 2.3,
    "C": 2.0,
    "C-": 1.7,
    "D+": 1.3,
    "D": 1.0,
    "F": 0.0,
}

CGPAStatusType = Literal["Not Calculated", "Excellent", "Good", "Average", "Below Average"]

# (lower bound inclusive, label), checked top-down
_STATUS_BANDS: tuple[tuple[float, CGPAStatusType], ...] = (
    (3.5, "Excellent"),
    (3.0, "Good"),
    (2.0, "Average"),
)


class Graded(Protocol):
    credits: int
    grade_points: float


class CGPAResult(BaseModel):
    """Credit-weighted grade point average and its label.

    value keeps full precision for re-aggregation; display is rounded to two places.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    value: float
    display: float
    status: CGPAStatusType
    total_credits: int


def grade_points(grade: str) -> float:
    """Look up the point value of a letter grade. Unknown grades are rejected."""
    try:
        return GRADE_POINTS[grade]
    except KeyError:
        raise ValidationError(["grade"], f"Unknown grade: {grade!r}") from None


def classify(cgpa: float) -> CGPAStatusType:
    """Qualitative label for a CGPA value."""
    for lower_bound, label in _STATUS_BANDS:
        if cgpa >= lower_bound:
            return label
    return "Below Average"


def grade_band(grade: str) -> CGPAStatusType:
    """Classify a single letter grade with the CGPA thresholds."""
    return classify(grade_points(grade))


def compute_cgpa(subjects: Iterable[Graded]) -> CGPAResult:
    """
    Credit-weighted average of grade points.

    An empty list is "Not Calculated" with value 0. A non-empty list whose
    credits sum to zero also yields 0 rather than dividing by zero.
    """
    subjects = list(subjects)
    if not subjects:
        return CGPAResult(value=0.0, display=0.0, status="Not Calculated", total_credits=0)

    total_credits = sum(s.credits for s in subjects)
    weighted = sum(s.grade_points * s.credits for s in subjects)
    value = weighted / total_credits if total_credits > 0 else 0.0

    return CGPAResult(
        value=value,
        display=round(value, 2),
        status=classify(value),
        total_credits=total_credits,
    )
