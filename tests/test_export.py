"""Unit tests for notes_app.export — export document and file naming."""

import json
from datetime import UTC, datetime, timedelta
from pathlib import Path

from notes_app.export import build_export, export_filename, export_json, write_export
from notes_app.models import Note

CREATED = datetime(2024, 1, 1, 9, 30, tzinfo=UTC)
EXPORTED = datetime(2024, 3, 5, 14, 7, 9, 123000, tzinfo=UTC)


def _notes() -> list[Note]:
    return [
        Note(
            id="2",
            title="Pinned",
            content="Keep me",
            category="Work",
            is_pinned=True,
            created_at=CREATED,
            updated_at=CREATED + timedelta(hours=1),
        ),
        Note(
            id="1",
            title="Plain",
            content="Just text",
            created_at=CREATED,
            updated_at=CREATED,
        ),
    ]


class TestBuildExport:
    def test_counts_and_order(self) -> None:
        doc = build_export(_notes(), EXPORTED)
        assert doc.total_notes == 2
        assert [n.title for n in doc.notes] == ["Pinned", "Plain"]
        assert doc.exported_at == EXPORTED

    def test_empty(self) -> None:
        assert build_export([], EXPORTED).total_notes == 0


class TestExportJson:
    def test_document_shape(self) -> None:
        data = json.loads(export_json(_notes(), EXPORTED))
        assert set(data) == {"exportedAt", "totalNotes", "notes"}
        assert data["totalNotes"] == len(data["notes"]) == 2
        assert data["exportedAt"].startswith("2024-03-05T14:07:09.123")

    def test_records_have_no_id(self) -> None:
        data = json.loads(export_json(_notes(), EXPORTED))
        for record in data["notes"]:
            assert "id" not in record
            assert set(record) == {
                "title",
                "content",
                "category",
                "isPinned",
                "createdAt",
                "updatedAt",
            }

    def test_record_values(self) -> None:
        record = json.loads(export_json(_notes(), EXPORTED))["notes"][0]
        assert record["category"] == "Work"
        assert record["isPinned"] is True

    def test_pretty_printed(self) -> None:
        assert "\n  " in export_json(_notes(), EXPORTED)


class TestExportFilename:
    def test_format(self) -> None:
        assert export_filename(EXPORTED) == "notes-export-2024-03-05T14-07-09-123Z.json"

    def test_converts_to_utc(self) -> None:
        local = EXPORTED.astimezone(tz=None)
        assert export_filename(local) == export_filename(EXPORTED)

    def test_no_colons_or_extra_dots(self) -> None:
        name = export_filename(EXPORTED)
        assert ":" not in name
        assert name.count(".") == 1


class TestWriteExport:
    def test_writes_file(self, tmp_path: Path) -> None:
        path = write_export(_notes(), tmp_path / "exports", EXPORTED)
        assert path.parent == tmp_path / "exports"
        assert path.name == export_filename(EXPORTED)
        assert json.loads(path.read_text())["totalNotes"] == 2
