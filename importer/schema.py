"""Read the list of raw entries out of a Day One export document."""

import json
from pathlib import Path
from typing import Any

from importer.exceptions import ExportFormatError


def read_entries(data: Any) -> list[dict]:
    """
    Return the export's entries in file order.

    A document without an ``entries`` list has no entries; that is not an
    error. Individual entries are not checked here.
    """
    if not isinstance(data, dict):
        return []
    entries = data.get("entries")
    if not isinstance(entries, list):
        return []
    return entries


def load_export(text: str) -> list[dict]:
    """Parse export JSON text and return its entries."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ExportFormatError(f"Export is not valid JSON: {e}") from e
    return read_entries(data)


def load_export_file(path: str | Path) -> list[dict]:
    """Read and parse an export JSON file from disk."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ExportFormatError(f"Could not read {path}: {e}") from e
    return load_export(text)
