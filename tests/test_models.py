"""Unit tests for notes_app.models — note records and wire format."""

from datetime import UTC, datetime, timedelta

import pytest
from pydantic import ValidationError

from notes_app.models import (
    DEFAULT_CATEGORY,
    Category,
    ExportedNote,
    Note,
    NoteChanges,
    NoteInput,
    NoteSnapshot,
)

NOW = datetime(2024, 1, 1, 12, 0, tzinfo=UTC)


def _note(**overrides) -> Note:
    fields = {
        "id": "1",
        "title": "Hello",
        "content": "World",
        "created_at": NOW,
        "updated_at": NOW,
    }
    fields.update(overrides)
    return Note(**fields)


# ---------------------------------------------------------------------------
# Category
# ---------------------------------------------------------------------------


class TestCategory:
    def test_exact_match(self) -> None:
        assert Category.coerce("Work") is Category.WORK

    def test_case_insensitive(self) -> None:
        assert Category.coerce("study") is Category.STUDY
        assert Category.coerce("  OTHERS ") is Category.OTHERS

    def test_invalid_defaults_to_personal(self) -> None:
        assert Category.coerce("Groceries") is DEFAULT_CATEGORY
        assert Category.coerce(None) is Category.PERSONAL
        assert Category.coerce(42) is Category.PERSONAL


# ---------------------------------------------------------------------------
# Note
# ---------------------------------------------------------------------------


class TestNoteModel:
    def test_defaults(self) -> None:
        note = _note()
        assert note.category is Category.PERSONAL
        assert note.is_pinned is False

    def test_strips_title_and_content(self) -> None:
        note = _note(title="  Hi ", content="\tthere\n")
        assert note.title == "Hi"
        assert note.content == "there"

    def test_blank_title_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _note(title="   ")

    def test_blank_content_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _note(content="")

    def test_title_max_length(self) -> None:
        assert _note(title="x" * 100).title == "x" * 100
        with pytest.raises(ValidationError):
            _note(title="x" * 101)

    def test_invalid_category_defaults(self) -> None:
        assert _note(category="nope").category is Category.PERSONAL

    def test_updated_before_created_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _note(updated_at=NOW - timedelta(seconds=1))

    def test_naive_timestamps_become_utc(self) -> None:
        note = _note(created_at=datetime(2024, 1, 1), updated_at=datetime(2024, 1, 1))
        assert note.created_at.tzinfo is not None

    def test_accepts_camel_case_fields(self) -> None:
        note = Note.model_validate(
            {
                "id": "1700000000000",
                "title": "T",
                "content": "C",
                "category": "Work",
                "isPinned": True,
                "createdAt": "2023-11-14T22:13:20.000Z",
                "updatedAt": "2023-11-14T22:13:20.000Z",
            }
        )
        assert note.is_pinned is True
        assert note.category is Category.WORK

    def test_dump_uses_camel_case(self) -> None:
        data = _note().model_dump(mode="json", by_alias=True)
        assert set(data) == {
            "id",
            "title",
            "content",
            "category",
            "isPinned",
            "createdAt",
            "updatedAt",
        }


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------


class TestNoteInput:
    def test_category_optional(self) -> None:
        data = NoteInput(title="T", content="C")
        assert data.category is Category.PERSONAL

    def test_none_category_defaults(self) -> None:
        assert NoteInput(title="T", content="C", category=None).category is Category.PERSONAL

    def test_whitespace_title_rejected(self) -> None:
        with pytest.raises(ValidationError):
            NoteInput(title=" ", content="C")


class TestNoteChanges:
    def test_only_set_fields_in_update(self) -> None:
        assert NoteChanges(title=" New ").as_update() == {"title": "New"}

    def test_alias_accepted(self) -> None:
        assert NoteChanges.model_validate({"isPinned": True}).as_update() == {
            "is_pinned": True
        }

    def test_none_fields_ignored(self) -> None:
        assert NoteChanges(title="T", category=None).as_update() == {"title": "T"}

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            NoteChanges.model_validate({"id": "other"})

    def test_blank_title_rejected(self) -> None:
        with pytest.raises(ValidationError):
            NoteChanges(title="  ")


# ---------------------------------------------------------------------------
# Snapshot / export records
# ---------------------------------------------------------------------------


class TestNoteSnapshot:
    def test_serialization_roundtrip(self) -> None:
        snapshot = NoteSnapshot([_note(id="2"), _note(id="1")])
        raw = snapshot.model_dump_json(by_alias=True)
        restored = NoteSnapshot.model_validate_json(raw)
        assert [n.id for n in restored.root] == ["2", "1"]
        assert restored.root == snapshot.root

    def test_duplicate_ids_rejected(self) -> None:
        raw = NoteSnapshot([_note(id="1")]).model_dump_json(by_alias=True)
        doubled = "[" + raw[1:-1] + "," + raw[1:-1] + "]"
        with pytest.raises(ValidationError):
            NoteSnapshot.model_validate_json(doubled)


class TestExportedNote:
    def test_drops_id(self) -> None:
        exported = ExportedNote.from_note(_note(is_pinned=True))
        data = exported.model_dump(by_alias=True)
        assert "id" not in data
        assert data["isPinned"] is True
        assert data["title"] == "Hello"
