"""JSON export of the note collection.

Exported records deliberately leave out ``id``; there is no import path that
would need it.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import UTC, datetime
from pathlib import Path

from .models import ExportedNote, Note, NotesExport, utcnow

logger = logging.getLogger("notes_app.export")


def build_export(notes: Sequence[Note], now: datetime | None = None) -> NotesExport:
    return NotesExport(
        exported_at=now or utcnow(),
        total_notes=len(notes),
        notes=[ExportedNote.from_note(n) for n in notes],
    )


def export_json(notes: Sequence[Note], now: datetime | None = None) -> str:
    """Pretty-printed export document."""
    return build_export(notes, now).model_dump_json(by_alias=True, indent=2)


def export_filename(now: datetime | None = None) -> str:
    """``notes-export-<timestamp>.json`` with ':' and '.' replaced by '-'.

    >>> export_filename(datetime(2024, 3, 5, 14, 7, 9, 123000, tzinfo=UTC))
    'notes-export-2024-03-05T14-07-09-123Z.json'
    """
    stamp = (now or utcnow()).astimezone(UTC)
    iso = stamp.strftime("%Y-%m-%dT%H:%M:%S") + f".{stamp.microsecond // 1000:03d}Z"
    return f"notes-export-{iso.replace(':', '-').replace('.', '-')}.json"


def write_export(
    notes: Sequence[Note], directory: Path, now: datetime | None = None
) -> Path:
    """Write the export document into ``directory`` and return its path."""
    now = now or utcnow()
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / export_filename(now)
    path.write_text(export_json(notes, now), encoding="utf-8")
    logger.info("Exported %d notes to %s", len(notes), path)
    return path
