"""Tests for the CGPA subject store."""

import pytest

from studydesk.errors import NotFoundError, ValidationError
from studydesk.services.stores import SubjectStore


@pytest.fixture
def store(storage) -> SubjectStore:
    return SubjectStore(storage)


def test_subjects_keep_insertion_order(store):
    math = store.create({"name": "Mathematics", "credits": 4, "grade": "A"})
    physics = store.create({"name": "Physics", "credits": 3, "grade": "B+"})
    assert store.list() == [math, physics]


def test_grade_points_come_from_table(store):
    subject = store.create({"name": "Chemistry", "credits": 3, "grade": "B-"})
    assert subject.grade_points == 2.7


def test_supplied_grade_points_are_ignored(store):
    subject = store.create({"name": "Chemistry", "credits": 3, "grade": "C", "gradePoints": 4.0})
    assert subject.grade_points == 2.0


def test_update_recomputes_grade_points(store):
    subject = store.create({"name": "Biology", "credits": 2, "grade": "A"})

    updated = store.update(subject.id, {"grade": "D+", "gradePoints": 4.0})

    assert updated.grade == "D+"
    assert updated.grade_points == 1.3
    assert updated.credits == 2
    assert store.get(subject.id).grade_points == 1.3


@pytest.mark.parametrize(
    ("data", "field"),
    [
        ({"name": "", "credits": 3, "grade": "A"}, "name"),
        ({"name": "Art", "credits": 0, "grade": "A"}, "credits"),
        ({"name": "Art", "credits": -2, "grade": "A"}, "credits"),
        ({"name": "Thesis", "credits": 7, "grade": "A"}, "credits"),
        ({"name": "Art", "credits": 3, "grade": "E"}, "grade"),
        ({"name": "Art", "grade": "A"}, "credits"),
    ],
)
def test_invalid_subjects_are_rejected(store, data, field):
    with pytest.raises(ValidationError) as exc_info:
        store.create(data)
    assert field in exc_info.value.fields
    assert store.list() == []


@pytest.mark.parametrize("credits", [0, 7])
def test_update_keeps_credits_in_range(store, credits):
    subject = store.create({"name": "Art", "credits": 6, "grade": "A"})

    with pytest.raises(ValidationError) as exc_info:
        store.update(subject.id, {"credits": credits})

    assert exc_info.value.fields == ["credits"]
    assert store.get(subject.id).credits == 6


def test_cgpa_over_store(store):
    assert store.compute_cgpa().status == "Not Calculated"

    store.create({"name": "Mathematics", "credits": 4, "grade": "A"})
    store.create({"name": "Physics", "credits": 3, "grade": "B+"})

    stats = store.compute_stats()
    assert stats.subject_count == 2
    assert stats.total_credits == 7
    assert stats.cgpa.display == 3.7
    assert stats.cgpa.status == "Excellent"


def test_delete(store):
    subject = store.create({"name": "History", "credits": 2, "grade": "B"})
    store.delete(subject.id)
    assert store.list() == []
    with pytest.raises(NotFoundError):
        store.delete(subject.id)


def test_stored_grade_points_are_rederived_on_load(storage):
    storage.save("subjects", [{"id": "x", "name": "Art", "credits": 2, "grade": "B", "gradePoints": 9}])
    assert SubjectStore(storage).get("x").grade_points == 3.0
