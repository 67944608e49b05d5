"""Seed local storage with realistic notes for screenshots.

Writes through ``NoteStore`` so the snapshot has the exact on-disk format
the app reads.

Usage:
    python scripts/seed_notes.py [--storage-path notes_storage.json] [--reset]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from notes_app.config import settings  # noqa: E402
from notes_app.storage import JsonFileStorage, NoteStorage  # noqa: E402
from notes_app.store import NoteStore  # noqa: E402

# Each entry: (title, content, category, pinned)
NOTES: list[tuple[str, str, str, bool]] = [
    (
        "Project Ideas",
        "Build a **local-first** notes app.\nKeep storage as a single JSON snapshot.",
        "Work",
        True,
    ),
    (
        "Meeting Notes",
        "Discussed Q1 targets. Follow up on the `export` format with design.",
        "Work",
        False,
    ),
    (
        "Reading List",
        "*Designing Data-Intensive Applications*\n*The Pragmatic Programmer*",
        "Study",
        False,
    ),
    (
        "Grocery list",
        "Eggs, milk, bread, coffee",
        "Personal",
        True,
    ),
    (
        "Exam prep",
        "Revise chapters 3-5 and do **two** past papers.",
        "Study",
        False,
    ),
    (
        "Gift ideas",
        "Board game, plant, a nice notebook",
        "Others",
        False,
    ),
]


def main() -> None:
    """Create every seed note in order."""
    parser = argparse.ArgumentParser(description="Seed notes for screenshots")
    parser.add_argument(
        "--storage-path",
        type=Path,
        default=settings.storage_path,
        help=f"Storage file (default: {settings.storage_path})",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Remove existing notes before seeding",
    )
    args = parser.parse_args()

    storage = NoteStorage(
        JsonFileStorage(args.storage_path, quota_bytes=settings.storage_quota_bytes),
        settings.notes_storage_key,
        settings.theme_storage_key,
    )
    store = NoteStore(storage)
    loaded = store.load()
    if not loaded.ok:
        print(f"  WARN: {loaded.message}; starting from an empty collection.")

    if args.reset:
        store.clear()

    print(f"\n  Seeding {len(NOTES)} notes into {args.storage_path}")
    failures = 0
    for i, (title, content, category, pinned) in enumerate(NOTES, 1):
        result = store.create({"title": title, "content": content, "category": category})
        if result.ok and pinned and result.note is not None:
            result = store.toggle_pin(result.note.id)
        status = "OK" if result.ok else f"FAIL ({result.message})"
        failures += 0 if result.ok else 1
        print(f"  [{i}/{len(NOTES)}] {title:<16} {category:<9} {status}")

    print(f"\n  Done! {store.count} notes stored.")
    if failures:
        sys.exit(1)


if __name__ == "__main__":
    main()
