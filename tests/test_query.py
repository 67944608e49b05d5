"""Unit tests for notes_app.query — search, category filter and pin partition."""

from datetime import UTC, datetime

from notes_app.models import Note
from notes_app.query import (
    ALL_CATEGORIES,
    CategoryCount,
    category_counts,
    filter_notes,
    matches_search,
    partition_pinned,
)

NOW = datetime(2024, 1, 1, 12, 0, tzinfo=UTC)


def _note(note_id: str, title: str, content: str = "body", **extra) -> Note:
    return Note(
        id=note_id,
        title=title,
        content=content,
        created_at=NOW,
        updated_at=NOW,
        **extra,
    )


NOTES = [
    _note("4", "Meeting", "quarterly review", category="Work", is_pinned=True),
    _note("3", "Algebra", "Homework for MONDAY", category="Study"),
    _note("2", "Groceries", "milk and eggs", category="Personal"),
    _note("1", "Standup", "daily meeting notes", category="Work"),
]


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------


class TestSearch:
    def test_empty_term_matches_everything(self) -> None:
        assert filter_notes(NOTES) == NOTES
        assert filter_notes(NOTES, "   ") == NOTES

    def test_title_or_content(self) -> None:
        ids = [n.id for n in filter_notes(NOTES, "meeting")]
        assert ids == ["4", "1"]

    def test_case_insensitive(self) -> None:
        assert [n.id for n in filter_notes(NOTES, "monday")] == ["3"]
        assert [n.id for n in filter_notes(NOTES, "ALGEBRA")] == ["3"]

    def test_no_matches(self) -> None:
        assert filter_notes(NOTES, "zebra") == []

    def test_matches_search_trims_term(self) -> None:
        assert matches_search(NOTES[2], "  milk ")


# ---------------------------------------------------------------------------
# Category
# ---------------------------------------------------------------------------


class TestCategoryFilter:
    def test_all(self) -> None:
        assert filter_notes(NOTES, category=ALL_CATEGORIES) == NOTES

    def test_lowercase_id(self) -> None:
        assert [n.id for n in filter_notes(NOTES, category="work")] == ["4", "1"]

    def test_display_name(self) -> None:
        assert [n.id for n in filter_notes(NOTES, category="Study")] == ["3"]

    def test_single_work_note(self) -> None:
        notes = [_note("1", "A", "x", category="Work")]
        assert filter_notes(notes, "", "work") == notes
        assert filter_notes(notes, "", "study") == []

    def test_unknown_category_matches_nothing(self) -> None:
        assert filter_notes(NOTES, category="errands") == []

    def test_combined_with_search(self) -> None:
        notes = [
            _note("2", "Work plan", "study the roadmap", category="Work"),
            _note("1", "Exam", "study chapters", category="Study"),
        ]
        assert [n.id for n in filter_notes(notes, "study", "work")] == ["2"]

    def test_result_is_subset_in_order(self) -> None:
        result = filter_notes(NOTES, "e", "work")
        positions = [NOTES.index(n) for n in result]
        assert positions == sorted(positions)


# ---------------------------------------------------------------------------
# Pinned partition
# ---------------------------------------------------------------------------


class TestPartition:
    def test_split_keeps_order(self) -> None:
        notes = [
            _note("5", "a", is_pinned=True),
            _note("4", "b"),
            _note("3", "c", is_pinned=True),
            _note("2", "d"),
        ]
        pinned, others = partition_pinned(notes)
        assert [n.id for n in pinned] == ["5", "3"]
        assert [n.id for n in others] == ["4", "2"]

    def test_empty(self) -> None:
        assert partition_pinned([]) == ([], [])


# ---------------------------------------------------------------------------
# Counts
# ---------------------------------------------------------------------------


class TestCategoryCounts:
    def test_all_first_and_zero_categories_omitted(self) -> None:
        counts = category_counts(NOTES)
        assert counts == [
            CategoryCount("all", "All", 4),
            CategoryCount("study", "Study", 1),
            CategoryCount("work", "Work", 2),
            CategoryCount("personal", "Personal", 1),
        ]

    def test_empty_collection(self) -> None:
        assert category_counts([]) == [CategoryCount("all", "All", 0)]
