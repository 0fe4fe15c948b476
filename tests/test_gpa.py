"""Tests for the grade point table and CGPA aggregation."""

import itertools
from types import SimpleNamespace

import pytest

from studydesk.errors import ValidationError
from studydesk.services.gpa import (
    GRADE_POINTS,
    classify,
    compute_cgpa,
    grade_band,
    grade_points,
)


def subject(credits: int, grade: str) -> SimpleNamespace:
    return SimpleNamespace(credits=credits, grade=grade, grade_points=GRADE_POINTS[grade])


def test_grade_table_values():
    assert grade_points("A+") == 4.0
    assert grade_points("A") == 4.0
    assert grade_points("A-") == 3.7
    assert grade_points("B+") == 3.3
    assert grade_points("C-") == 1.7
    assert grade_points("D") == 1.0
    assert grade_points("F") == 0.0
    assert len(GRADE_POINTS) == 12


def test_unknown_grade_is_rejected():
    with pytest.raises(ValidationError) as exc_info:
        grade_points("E")
    assert exc_info.value.fields == ["grade"]


def test_empty_list_is_not_calculated():
    result = compute_cgpa([])
    assert result.value == 0
    assert result.display == 0
    assert result.status == "Not Calculated"
    assert result.total_credits == 0


def test_weighted_average():
    result = compute_cgpa([subject(4, "A"), subject(3, "B+")])
    assert result.value == pytest.approx((4.0 * 4 + 3.3 * 3) / 7)
    assert result.display == 3.7
    assert result.status == "Excellent"
    assert result.total_credits == 7


def test_zero_total_credits_does_not_divide_by_zero():
    result = compute_cgpa([SimpleNamespace(credits=0, grade_points=4.0)])
    assert result.value == 0
    assert result.status == "Below Average"


@pytest.mark.parametrize(
    ("cgpa", "status"),
    [
        (4.0, "Excellent"),
        (3.5, "Excellent"),
        (3.49, "Good"),
        (3.0, "Good"),
        (2.99, "Average"),
        (2.0, "Average"),
        (1.99, "Below Average"),
        (0.0, "Below Average"),
    ],
)
def test_status_boundaries_are_inclusive_at_lower_bound(cgpa, status):
    assert classify(cgpa) == status


def test_grade_band():
    assert grade_band("A-") == "Excellent"
    assert grade_band("B") == "Good"
    assert grade_band("C") == "Average"
    assert grade_band("D+") == "Below Average"


def test_cgpa_stays_within_scale():
    grades = list(GRADE_POINTS)
    for (g1, g2), (c1, c2) in itertools.product(
        itertools.combinations(grades, 2), [(1, 6), (3, 3), (6, 1)]
    ):
        result = compute_cgpa([subject(c1, g1), subject(c2, g2)])
        assert 0.0 <= result.value <= 4.0
