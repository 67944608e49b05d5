"""Write a notes export file from the command line.

Usage:
    python scripts/export_notes.py [--storage-path notes_storage.json] [--out-dir exports/]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from notes_app.config import settings  # noqa: E402
from notes_app.export import write_export  # noqa: E402
from notes_app.storage import JsonFileStorage, NoteStorage  # noqa: E402
from notes_app.store import NoteStore  # noqa: E402


def main() -> None:
    parser = argparse.ArgumentParser(description="Export notes to JSON")
    parser.add_argument(
        "--storage-path",
        type=Path,
        default=settings.storage_path,
        help=f"Storage file (default: {settings.storage_path})",
    )
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=settings.export_dir,
        help=f"Directory for the export file (default: {settings.export_dir})",
    )
    args = parser.parse_args()

    storage = NoteStorage(
        JsonFileStorage(args.storage_path),
        settings.notes_storage_key,
        settings.theme_storage_key,
    )
    store = NoteStore(storage)
    result = store.load()
    if not result.ok:
        print(f"  FAIL: {result.message} from {args.storage_path}")
        sys.exit(1)
    if store.count == 0:
        print("  No notes to export")
        return

    path = write_export(store.notes, args.out_dir)
    print(f"  Exported {store.count} notes to {path}")


if __name__ == "__main__":
    main()
