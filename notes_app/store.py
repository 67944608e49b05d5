"""In-memory note collection with write-through persistence.

``NoteStore`` is the single source of truth for notes. Every operation
returns a ``StoreResult`` instead of raising; storage failures are reported
through the result and never roll back the in-memory change.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any

from pydantic import ValidationError

from .exceptions import PersistenceError, StorageError
from .models import Note, NoteChanges, NoteInput, utcnow
from .storage import NoteStorage

logger = logging.getLogger("notes_app.store")


class ErrorKind(StrEnum):
    VALIDATION = "validation"
    PERSISTENCE = "persistence"
    NOT_FOUND = "not_found"
    CORRUPT_STORAGE = "corrupt_storage"


@dataclass(frozen=True)
class StoreResult:
    """Outcome of a store operation.

    ``note`` is set for successful creates/updates and also for persistence
    failures, where the mutation already happened in memory.
    """

    ok: bool
    message: str = ""
    error: ErrorKind | None = None
    note: Note | None = None

    @classmethod
    def success(cls, message: str = "", note: Note | None = None) -> StoreResult:
        return cls(ok=True, message=message, note=note)

    @classmethod
    def failure(
        cls, error: ErrorKind, message: str, note: Note | None = None
    ) -> StoreResult:
        return cls(ok=False, message=message, error=error, note=note)


def _validation_message(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        field = ".".join(str(p) for p in err["loc"]) or "input"
        parts.append(f"{field}: {err['msg']}")
    return "; ".join(parts)


def _numeric_id(note_id: str) -> int:
    try:
        return int(note_id)
    except ValueError:
        return 0


class NoteStore:
    """Owns the ordered note collection (most recently created first)."""

    def __init__(
        self,
        storage: NoteStorage,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._storage = storage
        self._clock = clock
        self._notes: list[Note] = []
        self._last_id = 0

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @property
    def notes(self) -> tuple[Note, ...]:
        """Immutable view of the collection in store order."""
        return tuple(self._notes)

    @property
    def count(self) -> int:
        return len(self._notes)

    def get(self, note_id: str) -> Note | None:
        for note in self._notes:
            if note.id == note_id:
                return note
        return None

    def _index_of(self, note_id: str) -> int:
        for i, note in enumerate(self._notes):
            if note.id == note_id:
                return i
        return -1

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def load(self) -> StoreResult:
        """Replace the collection with the persisted snapshot."""
        try:
            loaded = self._storage.load_notes()
        except StorageError as exc:
            logger.error("Failed to load notes: %s — starting fresh", exc)
            self._reset([])
            return StoreResult.failure(ErrorKind.CORRUPT_STORAGE, "Failed to load notes")

        if loaded is None:
            logger.info("No saved notes found — starting fresh")
            loaded = []
        self._reset(loaded)
        return StoreResult.success(f"Loaded {len(loaded)} notes")

    def _reset(self, notes: list[Note]) -> None:
        self._notes = list(notes)
        self._last_id = max((_numeric_id(n.id) for n in self._notes), default=0)

    def _now(self) -> datetime:
        return self._clock()

    def _next_id(self, now: datetime) -> str:
        candidate = int(now.timestamp() * 1000)
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return str(candidate)

    def _persist(self, message: str, note: Note | None = None) -> StoreResult:
        try:
            self._storage.save_notes(self._notes)
        except PersistenceError as exc:
            logger.error("Error saving notes: %s", exc)
            return StoreResult.failure(ErrorKind.PERSISTENCE, "Failed to save notes", note)
        return StoreResult.success(message, note)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def create(self, data: NoteInput | Mapping[str, Any]) -> StoreResult:
        """Validate, prepend and persist a new note."""
        try:
            fields = data if isinstance(data, NoteInput) else NoteInput.model_validate(data)
        except ValidationError as exc:
            return StoreResult.failure(ErrorKind.VALIDATION, _validation_message(exc))

        now = self._now()
        note = Note(
            id=self._next_id(now),
            title=fields.title,
            content=fields.content,
            category=fields.category,
            created_at=now,
            updated_at=now,
        )
        self._notes.insert(0, note)
        logger.info("Created note %s — '%s'", note.id, note.title)
        return self._persist("Note created successfully", note)

    def update(
        self, note_id: str, changes: NoteChanges | Mapping[str, Any]
    ) -> StoreResult:
        """Merge the given fields into a note and refresh ``updatedAt``."""
        index = self._index_of(note_id)
        if index == -1:
            return StoreResult.failure(ErrorKind.NOT_FOUND, f"Note {note_id} not found")
        try:
            patch = (
                changes
                if isinstance(changes, NoteChanges)
                else NoteChanges.model_validate(changes)
            )
        except ValidationError as exc:
            return StoreResult.failure(ErrorKind.VALIDATION, _validation_message(exc))

        current = self._notes[index]
        updated_at = max(self._now(), current.created_at)
        note = current.model_copy(update={**patch.as_update(), "updated_at": updated_at})
        self._notes[index] = note
        logger.info("Updated note %s", note.id)
        return self._persist("Note updated successfully", note)

    def delete(self, note_id: str) -> StoreResult:
        """Remove a note. Confirmation is the caller's responsibility."""
        initial = len(self._notes)
        self._notes = [n for n in self._notes if n.id != note_id]
        if len(self._notes) == initial:
            return StoreResult.failure(ErrorKind.NOT_FOUND, f"Note {note_id} not found")
        logger.info("Deleted note %s", note_id)
        return self._persist("Note deleted successfully")

    def toggle_pin(self, note_id: str) -> StoreResult:
        note = self.get(note_id)
        if note is None:
            return StoreResult.failure(ErrorKind.NOT_FOUND, f"Note {note_id} not found")
        return self.update(note_id, NoteChanges(is_pinned=not note.is_pinned))

    def clear(self) -> StoreResult:
        """Drop every note and persist the empty collection."""
        self._notes = []
        logger.info("Cleared all notes")
        return self._persist("All notes cleared")
