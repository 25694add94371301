"""Tests for note identity derivation and vault paths."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from importer.exceptions import InvalidEntryError
from importer.models import EntryRecord
from importer.note_paths import (
    attachment_path,
    failed_imports_path,
    generate_filename,
    join_path,
    note_path,
    parse_creation_date,
)
from importer.settings import ImportConfiguration

from helpers import make_entry


def record(**fields) -> EntryRecord:
    return EntryRecord.from_dict(make_entry(**fields))


class TestGenerateFilename:
    """Test date/time and UUID note names."""

    def test_date_time_in_given_zone(self, config, utc) -> None:
        assert generate_filename(record(), config, utc) == "2023-05-01_10-15-30"

    def test_converts_to_zone(self, config) -> None:
        tz = ZoneInfo("Asia/Kolkata")
        assert generate_filename(record(), config, tz) == "2023-05-01_15-45-30"

    def test_local_day_can_differ_from_utc_day(self, config) -> None:
        tz = ZoneInfo("America/Los_Angeles")
        entry = record(creation_date="2023-05-01T03:00:00Z")
        assert generate_filename(entry, config, tz) == "2023-04-30_20-00-00"

    def test_defaults_to_machine_local_time(self, config) -> None:
        expected = datetime(2023, 5, 1, 10, 15, 30, tzinfo=timezone.utc).astimezone()
        assert generate_filename(record(), config) == expected.strftime("%Y-%m-%d_%H-%M-%S")

    def test_only_time_token_changes_with_time(self, config, utc) -> None:
        first = generate_filename(record(creation_date="2023-05-01T10:15:30Z"), config, utc)
        second = generate_filename(record(creation_date="2023-05-01T18:02:09Z"), config, utc)
        assert first.split("_")[0] == second.split("_")[0]
        assert first.split("_")[1] != second.split("_")[1]

    def test_same_second_collides(self, config, utc) -> None:
        a = record(uuid="a", creation_date="2023-05-01T10:15:30Z")
        b = record(uuid="b", creation_date="2023-05-01T10:15:30.500Z")
        assert generate_filename(a, config, utc) == generate_filename(b, config, utc)

    def test_offset_timestamp(self, config, utc) -> None:
        entry = record(creation_date="2023-05-01T12:15:30+02:00")
        assert generate_filename(entry, config, utc) == "2023-05-01_10-15-30"

    def test_naive_timestamp_is_local(self, config) -> None:
        tz = timezone(timedelta(hours=5))
        entry = record(creation_date="2023-05-01T10:15:30")
        assert generate_filename(entry, config, tz) == "2023-05-01_10-15-30"

    @pytest.mark.parametrize("uuid", [
        "ABCDEF0123456789ABCDEF0123456789",
        "weird id with spaces",
        "ünïcödé",
    ])
    def test_uuid_filenames_are_verbatim(self, uuid: str) -> None:
        config = ImportConfiguration(use_uuid_filenames=True)
        assert generate_filename(record(uuid=uuid), config) == uuid

    def test_uuid_mode_ignores_bad_date(self) -> None:
        config = ImportConfiguration(use_uuid_filenames=True)
        assert generate_filename(record(creation_date="yesterday"), config) == "abc"

    @pytest.mark.parametrize("value", ["yesterday", "2023-13-45T10:00:00Z", "Invalid Date"])
    def test_unparseable_date_raises(self, config, value: str) -> None:
        with pytest.raises(InvalidEntryError, match="creationDate"):
            generate_filename(record(creation_date=value), config)


class TestParseCreationDate:
    def test_date_only_is_utc_midnight(self) -> None:
        dt = parse_creation_date("2023-05-01")
        assert dt == datetime(2023, 5, 1, tzinfo=timezone.utc)

    def test_empty_raises(self) -> None:
        with pytest.raises(InvalidEntryError):
            parse_creation_date("")


class TestPaths:
    """Test vault-relative path building."""

    def test_note_path(self) -> None:
        assert note_path("Day One Import", "2023-05-01_10-15-30") == "Day One Import/2023-05-01_10-15-30.md"

    def test_note_path_at_vault_root(self) -> None:
        assert note_path("", "abc") == "abc.md"

    def test_attachment_path(self) -> None:
        assert attachment_path("Journal/", "P1.jpg") == "Journal/attachments/P1.jpg"

    def test_join_path_drops_empty_parts(self) -> None:
        assert join_path("/a/", "", "b") == "a/b"

    def test_failed_imports_path(self) -> None:
        assert failed_imports_path("Day One Import") == "Day One Import/Failed Imports.md"
        assert failed_imports_path("Day One Import", 2) == "Day One Import/Failed Imports 2.md"
