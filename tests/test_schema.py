"""Tests for reading entries out of an export document."""

from __future__ import annotations

from pathlib import Path

import pytest

from importer.exceptions import ExportFormatError
from importer.schema import load_export, load_export_file, read_entries

from helpers import export_json, make_entry


class TestReadEntries:
    """Test read_entries on well-formed and odd documents."""

    def test_returns_entries_in_order(self) -> None:
        entries = [make_entry("1"), make_entry("2"), make_entry("3")]
        assert read_entries({"entries": entries}) == entries

    def test_missing_entries_is_empty(self) -> None:
        assert read_entries({"metadata": {}}) == []

    @pytest.mark.parametrize("value", [None, "entries", 3, {"uuid": "x"}])
    def test_non_list_entries_is_empty(self, value) -> None:
        assert read_entries({"entries": value}) == []

    @pytest.mark.parametrize("data", [None, [], "text", 12])
    def test_non_object_document_is_empty(self, data) -> None:
        assert read_entries(data) == []

    def test_malformed_entries_are_passed_through(self) -> None:
        """Entry-level problems are left for the per-entry step."""
        entries = [make_entry("ok"), "not an entry", {"text": "no uuid"}]
        assert read_entries({"entries": entries}) == entries


class TestLoadExport:
    """Test parsing export JSON text and files."""

    def test_parses_json_text(self) -> None:
        entries = load_export(export_json(make_entry("a"), make_entry("b")))
        assert [e["uuid"] for e in entries] == ["a", "b"]

    def test_invalid_json_is_fatal(self) -> None:
        with pytest.raises(ExportFormatError):
            load_export("{not json")

    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "Journal.json"
        path.write_text(export_json(make_entry("a")), encoding="utf-8")
        assert load_export_file(path)[0]["uuid"] == "a"

    def test_missing_file_is_fatal(self, tmp_path: Path) -> None:
        with pytest.raises(ExportFormatError):
            load_export_file(tmp_path / "missing.json")
