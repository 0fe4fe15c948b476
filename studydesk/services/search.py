"""Free-text search and categorical filters for notes and resources.

Every query is a full rescan of the current list snapshot. Collections are a
single user's notes and bookmarks, so no index is kept.
"""

from collections.abc import Iterable, Sequence

from studydesk.schemas.notes import Note
from studydesk.schemas.resources import Resource

# Sentinel value that disables a categorical filter
ALL = "All"


def matches_text(term: str, title: str, body: str, tags: Iterable[str]) -> bool:
    """
    Case-insensitive substring match on title, body or any tag.

    An empty (or whitespace-only) term matches everything.
    """
    term = term.strip().lower()
    if not term:
        return True
    return (
        term in title.lower()
        or term in body.lower()
        or any(term in tag.lower() for tag in tags)
    )


def matches_category(selected: str | None, value: str) -> bool:
    """Exact match, unless the filter is unset or the "All" sentinel."""
    return selected is None or selected == ALL or selected == value


def filter_notes(notes: Sequence[Note], search: str = "") -> list[Note]:
    """Notes whose title, content or tags contain the search term, in order."""
    return [n for n in notes if matches_text(search, n.title, n.content, n.tags)]


def filter_resources(
    resources: Sequence[Resource],
    search: str = "",
    subject: str | None = ALL,
    type: str | None = ALL,
) -> list[Resource]:
    """Resources passing the text search and both categorical filters."""
    return [
        r
        for r in resources
        if matches_text(search, r.title, r.description, r.tags)
        and matches_category(subject, r.subject)
        and matches_category(type, r.type)
    ]


def subject_options(resources: Iterable[Resource]) -> list[str]:
    """Choices for the subject filter: "All" then each subject once, first seen first."""
    return [ALL, *dict.fromkeys(r.subject for r in resources)]
