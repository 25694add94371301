"""Import Day One entries into a vault as Markdown notes.

Entries are processed one at a time. A failing entry is recorded in the
report and the run moves on; notes that already exist are skipped, never
overwritten. Failures are written to a "Failed Imports" note at the end.
"""

from __future__ import annotations

import logging
import re
from datetime import tzinfo
from pathlib import Path
from typing import Any, Callable

from jinja2 import Environment, FileSystemLoader

from importer.exceptions import DuplicateNoteError
from importer.media import MediaResolver, copy_media
from importer.models import EntryRecord, ImportReport
from importer.note_markdown import generate_markdown, media_references
from importer.note_paths import (
    attachment_path,
    attachments_folder,
    failed_imports_path,
    generate_filename,
    note_path,
)
from importer.settings import ImportConfiguration
from importer.vault import Vault

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


def ensure_folder(vault: Vault, path: str) -> None:
    if path and not vault.exists(path):
        vault.create_folder(path)


def create_note_from_entry(
    raw_entry: Any,
    vault: Vault,
    config: ImportConfiguration,
    tz: tzinfo | None = None,
) -> tuple[EntryRecord, str]:
    """
    Write the note for one raw entry and return (record, note path).

    Raises DuplicateNoteError if the note exists, InvalidEntryError for bad
    entries, and whatever the vault raises on write.
    """
    entry = EntryRecord.from_dict(raw_entry)
    filename = generate_filename(entry, config, tz)
    path = note_path(config.import_folder, filename)

    if vault.exists(path):
        raise DuplicateNoteError(path)

    content = generate_markdown(entry, config)
    try:
        vault.create(path, content)
    except FileExistsError:
        raise DuplicateNoteError(path) from None
    return entry, path


def copy_entry_media(
    entry: EntryRecord,
    vault: Vault,
    resolver: MediaResolver,
    config: ImportConfiguration,
    report: ImportReport,
) -> None:
    for media in media_references(entry):
        try:
            copied = copy_media(vault, resolver, media, config.import_folder)
        except Exception as e:
            logger.warning("Failed to copy %s for entry %s: %s", media.filename, entry.uuid, e)
            copied = False
        if copied:
            report.media_copied += 1
        elif not vault.exists(attachment_path(config.import_folder, media.filename)):
            report.media_missing += 1


def _one_line(value: Any) -> str:
    return re.sub(r"\s*[\r\n]+\s*", " ", str(value)).strip()


def _failure_row(raw_entry: Any, error: str) -> dict:
    fields = raw_entry if isinstance(raw_entry, dict) else {}
    return {
        "uuid": _one_line(fields.get("uuid") or "unknown"),
        "date": _one_line(fields.get("creationDate") or "unknown"),
        "error": _one_line(error),
    }


def render_failed_imports(failures: list[tuple[Any, str]]) -> str:
    templates_dir = Path(__file__).resolve().parent / "templates"
    env = Environment(loader=FileSystemLoader(templates_dir), trim_blocks=True)
    template = env.get_template("failed_imports.md")
    rows = [_failure_row(entry, error) for entry, error in failures]
    return template.render({"failures": rows})


def write_failed_imports_report(vault: Vault, folder: str, failures: list[tuple[Any, str]]) -> str:
    """Write the failure report next to the notes and return its path. Earlier reports are kept."""
    attempt = 0
    path = failed_imports_path(folder)
    while vault.exists(path):
        attempt += 1
        path = failed_imports_path(folder, attempt)
    vault.create(path, render_failed_imports(failures))
    return path


def import_entries(
    entries: list[Any],
    vault: Vault,
    config: ImportConfiguration,
    resolver: MediaResolver | None = None,
    *,
    tz: tzinfo | None = None,
    progress: ProgressCallback | None = None,
) -> ImportReport:
    """
    Convert every entry to a note in config.import_folder.

    Media is copied through resolver when one is given. Returns the report
    with succeeded, skipped and failed counts.
    """
    folder = config.import_folder
    ensure_folder(vault, folder)
    ensure_folder(vault, attachments_folder(folder))

    report = ImportReport()
    total = len(entries)

    for idx, raw_entry in enumerate(entries, start=1):
        try:
            entry, path = create_note_from_entry(raw_entry, vault, config, tz)
        except DuplicateNoteError as e:
            report.skipped += 1
            logger.info("Skipping entry, note exists: %s", e.path)
        except Exception as e:
            report.add_failure(raw_entry, str(e))
            uuid = raw_entry.get("uuid") if isinstance(raw_entry, dict) else None
            logger.warning("Failed to import entry %s: %s", uuid, e)
        else:
            report.succeeded += 1
            logger.debug("Created %s", path)
            if resolver is not None:
                copy_entry_media(entry, vault, resolver, config, report)

        if progress:
            progress(idx, total)

    if report.failures:
        try:
            report.report_path = write_failed_imports_report(vault, folder, report.failures)
        except OSError as e:
            logger.error("Could not write failure report: %s", e)
        else:
            logger.info("Wrote failure report to %s", report.report_path)

    return report
