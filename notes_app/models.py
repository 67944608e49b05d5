"""Pydantic models for the notes app.

Persisted and exported records use the camelCase field names of the
browser-side format (``isPinned``, ``createdAt``...); Python code works with
the snake_case attribute names.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    RootModel,
    field_validator,
    model_validator,
)

TITLE_MAX_LENGTH = 100


class Category(StrEnum):
    """Fixed set of note categories."""

    STUDY = "Study"
    WORK = "Work"
    PERSONAL = "Personal"
    OTHERS = "Others"

    @classmethod
    def coerce(cls, value: Any) -> Category:
        """Match a category case-insensitively, falling back to Personal."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in cls:
                if member.value.lower() == wanted:
                    return member
        return DEFAULT_CATEGORY


DEFAULT_CATEGORY = Category.PERSONAL
CATEGORIES: tuple[Category, ...] = tuple(Category)


class Theme(StrEnum):
    LIGHT = "light"
    DARK = "dark"


def utcnow() -> datetime:
    return datetime.now(UTC)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


_NOTE_CONFIG = ConfigDict(populate_by_name=True, str_strip_whitespace=True)


class Note(BaseModel):
    """A single note with metadata."""

    model_config = _NOTE_CONFIG

    id: str = Field(..., min_length=1, description="Immutable note identifier")
    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH)
    content: str = Field(..., min_length=1, description="Note body")
    category: Category = DEFAULT_CATEGORY
    is_pinned: bool = Field(False, alias="isPinned")
    created_at: datetime = Field(..., alias="createdAt")
    updated_at: datetime = Field(..., alias="updatedAt")

    @field_validator("category", mode="before")
    @classmethod
    def _coerce_category(cls, value: Any) -> Category:
        return Category.coerce(value)

    @field_validator("created_at", "updated_at")
    @classmethod
    def _ensure_utc(cls, value: datetime) -> datetime:
        return _as_utc(value)

    @model_validator(mode="after")
    def _check_timestamps(self) -> Note:
        if self.updated_at < self.created_at:
            raise ValueError("updatedAt must not be earlier than createdAt")
        return self


class NoteInput(BaseModel):
    """User-submitted fields for a new note."""

    model_config = _NOTE_CONFIG

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH)
    content: str = Field(..., min_length=1)
    category: Category = DEFAULT_CATEGORY

    @field_validator("category", mode="before")
    @classmethod
    def _coerce_category(cls, value: Any) -> Category:
        return Category.coerce(value)


class NoteChanges(BaseModel):
    """Partial update of a note. Only the fields that were set are applied."""

    model_config = ConfigDict(
        populate_by_name=True, str_strip_whitespace=True, extra="forbid"
    )

    title: str | None = Field(None, min_length=1, max_length=TITLE_MAX_LENGTH)
    content: str | None = Field(None, min_length=1)
    category: Category | None = None
    is_pinned: bool | None = Field(None, alias="isPinned")

    @field_validator("category", mode="before")
    @classmethod
    def _coerce_category(cls, value: Any) -> Category | None:
        if value is None:
            return None
        return Category.coerce(value)

    def as_update(self) -> dict[str, Any]:
        """Attribute-name mapping of the fields that were actually provided."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class NoteSnapshot(RootModel[list[Note]]):
    """The full persisted note collection, serialized as a JSON array."""

    @model_validator(mode="after")
    def _unique_ids(self) -> NoteSnapshot:
        ids = [note.id for note in self.root]
        if len(ids) != len(set(ids)):
            raise ValueError("duplicate note ids in snapshot")
        return self


class ExportedNote(BaseModel):
    """A note as written to an export file (no ``id``)."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    content: str
    category: Category
    is_pinned: bool = Field(alias="isPinned")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    @classmethod
    def from_note(cls, note: Note) -> ExportedNote:
        return cls.model_validate(note.model_dump(exclude={"id"}))


class NotesExport(BaseModel):
    """Container for an export document."""

    model_config = ConfigDict(populate_by_name=True)

    exported_at: datetime = Field(alias="exportedAt")
    total_notes: int = Field(alias="totalNotes", ge=0)
    notes: list[ExportedNote] = Field(default_factory=list)
