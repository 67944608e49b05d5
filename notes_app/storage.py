"""Local key-value storage backends and the note snapshot adapter."""

from __future__ import annotations

import json
import logging
import os
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from pathlib import Path

from pydantic import ValidationError

from .config import Settings
from .exceptions import CorruptStorageError, PersistenceError, QuotaExceededError
from .models import Note, NoteSnapshot, Theme

logger = logging.getLogger("notes_app.storage")


def _usage(items: Mapping[str, str]) -> int:
    return sum(len(k.encode("utf-8")) + len(v.encode("utf-8")) for k, v in items.items())


class KeyValueStorage(ABC):
    """String-to-string storage with whole-value writes, like browser local storage."""

    def __init__(self, quota_bytes: int | None = None) -> None:
        self._quota = quota_bytes

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Return the stored value, or None when the key is absent."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete a key. Missing keys are ignored."""

    def _check_quota(self, items: Mapping[str, str]) -> None:
        if self._quota is None:
            return
        required = _usage(items)
        if required > self._quota:
            raise QuotaExceededError(required, self._quota)


class MemoryStorage(KeyValueStorage):
    """In-process storage. Used in tests and as a fallback when no file is wanted."""

    def __init__(
        self,
        initial: Mapping[str, str] | None = None,
        quota_bytes: int | None = None,
    ) -> None:
        super().__init__(quota_bytes)
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        candidate = {**self._items, key: value}
        self._check_quota(candidate)
        self._items = candidate

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileStorage(KeyValueStorage):
    """Manages key-value persistence using a local JSON file.

    The whole file is rewritten on every change through a temporary file and
    ``os.replace``, so a failed write never leaves a partial snapshot behind.
    """

    def __init__(self, path: Path, quota_bytes: int | None = None) -> None:
        super().__init__(quota_bytes)
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise CorruptStorageError(f"cannot read {self._path}: {exc}") from exc
        if not isinstance(raw, dict) or not all(
            isinstance(v, str) for v in raw.values()
        ):
            raise CorruptStorageError(f"{self._path} is not a key-value object")
        return raw

    def _read_for_write(self) -> dict[str, str]:
        try:
            return self._read()
        except CorruptStorageError as exc:
            logger.warning("Overwriting unreadable storage file: %s", exc)
            return {}

    def _write(self, items: dict[str, str]) -> None:
        self._check_quota(items)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(items, ensure_ascii=False), encoding="utf-8")
            os.replace(tmp, self._path)
        except OSError as exc:
            raise PersistenceError(f"cannot write {self._path}: {exc}") from exc

    def get_item(self, key: str) -> str | None:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read_for_write()
        items[key] = value
        self._write(items)

    def remove_item(self, key: str) -> None:
        items = self._read_for_write()
        if items.pop(key, None) is not None:
            self._write(items)


class NoteStorage:
    """Reads and writes the note snapshot and theme preference."""

    def __init__(
        self,
        backend: KeyValueStorage,
        notes_key: str = "notesApp_notes",
        theme_key: str = "notesApp_theme",
    ) -> None:
        self._backend = backend
        self._notes_key = notes_key
        self._theme_key = theme_key

    @classmethod
    def from_settings(cls, settings: Settings) -> NoteStorage:
        """Build the file-backed storage described by the settings."""
        backend = JsonFileStorage(
            settings.storage_path, quota_bytes=settings.storage_quota_bytes
        )
        return cls(backend, settings.notes_storage_key, settings.theme_storage_key)

    @property
    def backend(self) -> KeyValueStorage:
        return self._backend

    def load_notes(self) -> list[Note] | None:
        """Return the persisted notes, or None when nothing was ever saved.

        Raises CorruptStorageError when data exists but is not a valid snapshot.
        """
        raw = self._backend.get_item(self._notes_key)
        if raw is None:
            return None
        try:
            snapshot = NoteSnapshot.model_validate_json(raw)
        except ValidationError as exc:
            raise CorruptStorageError(
                f"invalid note snapshot under '{self._notes_key}': "
                f"{exc.error_count()} error(s)"
            ) from exc
        logger.info("Loaded %d notes from '%s'", len(snapshot.root), self._notes_key)
        return snapshot.root

    def save_notes(self, notes: Sequence[Note]) -> None:
        """Write the complete collection. Raises PersistenceError on failure."""
        payload = NoteSnapshot(list(notes)).model_dump_json(by_alias=True)
        self._backend.set_item(self._notes_key, payload)

    def load_theme(self) -> Theme | None:
        raw = self._backend.get_item(self._theme_key)
        if raw in (Theme.LIGHT, Theme.DARK):
            return Theme(raw)
        return None

    def save_theme(self, theme: Theme) -> None:
        self._backend.set_item(self._theme_key, Theme(theme).value)

    def clear_theme(self) -> None:
        """Forget the saved theme so the system preference applies again."""
        self._backend.remove_item(self._theme_key)
