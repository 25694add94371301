"""Date parsing and vault paths for imported notes."""

from datetime import datetime, timezone, tzinfo

from importer.exceptions import InvalidEntryError
from importer.models import EntryRecord
from importer.settings import ImportConfiguration

ATTACHMENTS_FOLDER = "attachments"
FAILED_IMPORTS_NAME = "Failed Imports"


def parse_creation_date(creation_date: str) -> datetime:
    """
    Parse a Day One ISO 8601 timestamp.

    Date-only values are taken as UTC midnight. Raises InvalidEntryError
    when the value is empty or cannot be parsed.
    """
    if not creation_date or not isinstance(creation_date, str):
        raise InvalidEntryError("Entry has no creationDate")
    value = creation_date.strip()
    try:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        raise InvalidEntryError(f"Invalid creationDate: {creation_date!r}") from None
    if len(value) == 10:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def to_local(dt: datetime, tz: tzinfo | None = None) -> datetime:
    """
    Convert to tz, or to the machine's local zone when tz is None.
    Naive datetimes are read as already being in that zone.
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=tz) if tz else dt.astimezone()
    return dt.astimezone(tz)


def generate_filename(
    entry: EntryRecord,
    config: ImportConfiguration,
    tz: tzinfo | None = None,
) -> str:
    """
    Return the note name (without .md) for an entry.

    Either the uuid, or YYYY-MM-DD_HH-MM-SS from creationDate in local time.
    Entries created in the same second get the same name.
    """
    if config.use_uuid_filenames:
        return entry.uuid

    local = to_local(parse_creation_date(entry.creation_date), tz)
    date_str = local.strftime("%Y-%m-%d")
    time_str = local.strftime("%H:%M:%S").replace(":", "-")
    return f"{date_str}_{time_str}"


def join_path(*parts: str) -> str:
    """Join vault path segments with '/', dropping empty segments and stray slashes."""
    cleaned = [p.strip("/") for p in parts if p and p.strip("/")]
    return "/".join(cleaned)


def note_path(folder: str, filename: str) -> str:
    return join_path(folder, f"{filename}.md")


def attachments_folder(folder: str) -> str:
    return join_path(folder, ATTACHMENTS_FOLDER)


def attachment_path(folder: str, media_filename: str) -> str:
    return join_path(folder, ATTACHMENTS_FOLDER, media_filename)


def failed_imports_path(folder: str, attempt: int = 0) -> str:
    """Report path; later attempts get a numeric suffix (Failed Imports 1.md, ...)."""
    name = FAILED_IMPORTS_NAME if attempt == 0 else f"{FAILED_IMPORTS_NAME} {attempt}"
    return note_path(folder, name)
