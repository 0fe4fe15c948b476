"""Tests for the study resources store."""

import pytest

from studydesk.errors import NotFoundError, ValidationError
from studydesk.services.stores import ResourceStore


@pytest.fixture
def store(storage) -> ResourceStore:
    return ResourceStore(storage)


def add(store: ResourceStore, title: str, subject: str = "Physics", type: str = "website", **kwargs):
    return store.create(
        {"title": title, "url": "https://example.org/" + title, "subject": subject, "type": type, **kwargs}
    )


def test_create_starts_unrated(store):
    resource = add(store, "MIT OCW", tags="physics, mit ,,free")

    assert resource.rating == 0
    assert resource.description == ""
    assert resource.tags == ["physics", "mit", "free"]
    assert resource.added_at is not None


@pytest.mark.parametrize("missing", ["title", "url", "subject"])
def test_create_requires_title_url_subject(store, missing):
    data = {"title": "Khan", "url": "https://khanacademy.org", "subject": "Mathematics"}
    data[missing] = ""

    with pytest.raises(ValidationError) as exc_info:
        store.create(data)

    assert exc_info.value.fields == [missing]
    assert store.list() == []


def test_rate(store):
    resource = add(store, "CLRS", type="book")

    assert store.rate(resource.id, 4).rating == 4
    assert store.rate(resource.id, 1).rating == 1
    assert store.get(resource.id).rating == 1


@pytest.mark.parametrize("rating", [0, 6, -1])
def test_rate_out_of_range(store, rating):
    resource = add(store, "CLRS")
    with pytest.raises(ValidationError):
        store.rate(resource.id, rating)
    assert store.get(resource.id).rating == 0


def test_rate_unknown(store):
    with pytest.raises(NotFoundError):
        store.rate("missing", 3)


def test_update_leaves_rating_alone(store):
    resource = add(store, "Old")
    store.rate(resource.id, 5)

    updated = store.update(
        resource.id,
        {"title": "New", "subject": "Chemistry", "tags": "a, b", "rating": 1},
    )

    assert updated.title == "New"
    assert updated.subject == "Chemistry"
    assert updated.tags == ["a", "b"]
    assert updated.rating == 5


@pytest.mark.parametrize("field", ["title", "url"])
def test_update_rejects_blank_title_or_url(store, field):
    resource = add(store, "Keep")
    with pytest.raises(ValidationError):
        store.update(resource.id, {field: " "})
    assert store.get(resource.id) == resource


def test_filter_by_subject_and_type(store):
    physics_video = add(store, "Lectures", "Physics", "video")
    add(store, "Notes", "Physics", "document")
    add(store, "Calculus", "Mathematics", "video")

    assert store.filter(subject="Physics", type="video") == [physics_video]
    assert len(store.filter()) == 3


def test_subject_options(store):
    add(store, "a", "Physics")
    add(store, "b", "Mathematics")
    add(store, "c", "Physics")
    assert store.subject_options() == ["All", "Physics", "Mathematics"]


def test_stats(store):
    a = add(store, "a", "Physics", "video")
    b = add(store, "b", "Mathematics", "video")
    add(store, "c", "Physics", "book")
    store.rate(a.id, 4)
    store.rate(b.id, 3)

    stats = store.compute_stats()
    assert (stats.total, stats.high_rated, stats.videos, stats.subjects) == (3, 1, 2, 2)
