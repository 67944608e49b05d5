"""Exceptions raised by the storage layer.

They never cross the note store boundary: ``NoteStore`` converts them into
``StoreResult`` failures.
"""


class NotesAppError(Exception):
    """Base class for notes app errors."""


class StorageError(NotesAppError):
    """Local key-value storage could not be used."""


class PersistenceError(StorageError):
    """A write to local storage failed."""


class QuotaExceededError(PersistenceError):
    """A write would exceed the storage quota."""

    def __init__(self, required: int, quota: int) -> None:
        super().__init__(f"storage quota exceeded ({required} > {quota} bytes)")
        self.required = required
        self.quota = quota


class CorruptStorageError(StorageError):
    """Persisted data exists but cannot be decoded."""
