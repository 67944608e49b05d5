"""Pure filtering helpers over a note collection.

None of these functions reorder notes: results keep the relative order of
the input, which is the store's most-recently-created-first order.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .models import CATEGORIES, Note

ALL_CATEGORIES = "all"


def matches_search(note: Note, search_term: str) -> bool:
    """Case-insensitive substring match on title or content."""
    term = search_term.strip().lower()
    if not term:
        return True
    return term in note.title.lower() or term in note.content.lower()


def matches_category(note: Note, category: str) -> bool:
    wanted = category.strip().lower()
    if not wanted or wanted == ALL_CATEGORIES:
        return True
    return note.category.lower() == wanted


def filter_notes(
    notes: Iterable[Note],
    search_term: str = "",
    category: str = ALL_CATEGORIES,
) -> list[Note]:
    """Return the notes matching both the search term and the category."""
    return [
        n for n in notes if matches_search(n, search_term) and matches_category(n, category)
    ]


def partition_pinned(notes: Iterable[Note]) -> tuple[list[Note], list[Note]]:
    """Split notes into (pinned, others), each in original order."""
    pinned: list[Note] = []
    others: list[Note] = []
    for note in notes:
        (pinned if note.is_pinned else others).append(note)
    return pinned, others


@dataclass(frozen=True)
class CategoryCount:
    id: str
    label: str
    count: int


def category_counts(notes: Iterable[Note]) -> list[CategoryCount]:
    """Counts for the filter controls: "all" first, then non-empty categories."""
    notes = list(notes)
    counts = [CategoryCount(ALL_CATEGORIES, "All", len(notes))]
    for category in CATEGORIES:
        count = sum(1 for n in notes if n.category == category)
        if count:
            counts.append(CategoryCount(category.lower(), category.value, count))
    return counts
