"""Convert a Day One entry to Markdown note text, with embeds for its media."""

import json
from typing import Any

from importer.entry_helpers import front_matter
from importer.models import EntryRecord, MediaReference
from importer.note_paths import ATTACHMENTS_FOLDER
from importer.settings import ImportConfiguration


def extract_rich_text(rich_text: Any) -> str:
    """
    Concatenate the literal text of every fragment in a richText document.

    Day One stores richText as a JSON string with a ``contents`` list; all
    formatting and embedded objects are dropped. Returns "" when the document
    cannot be decoded.
    """
    if isinstance(rich_text, str):
        try:
            rich_text = json.loads(rich_text)
        except json.JSONDecodeError:
            return ""
    if not isinstance(rich_text, dict):
        return ""

    contents = rich_text.get("contents")
    if not isinstance(contents, list):
        return ""

    parts: list[str] = []
    for item in contents:
        if isinstance(item, dict) and isinstance(item.get("text"), str):
            parts.append(item["text"])
    return "".join(parts)


def entry_body_text(entry: EntryRecord) -> str:
    """Decoded richText when it yields text, else the plain text field."""
    if entry.rich_text:
        rich = extract_rich_text(entry.rich_text)
        if rich:
            return rich
    return entry.text


def _media_link(media: MediaReference) -> str:
    return f"{ATTACHMENTS_FOLDER}/{media.filename}"


def media_sections(entry: EntryRecord) -> list[str]:
    """Photos, Audio and Videos sections; empty kinds produce nothing."""
    lines: list[str] = []

    if entry.photos:
        lines.extend(["", "## Photos"])
        for index, photo in enumerate(entry.photos, start=1):
            lines.append(f"![Photo {index}]({_media_link(photo)})")

    if entry.audios:
        lines.extend(["", "## Audio"])
        for audio in entry.audios:
            lines.append(f"![[{_media_link(audio)}]]")

    if entry.videos:
        lines.extend(["", "## Videos"])
        for video in entry.videos:
            lines.append(f"![[{_media_link(video)}]]")

    return lines


def generate_markdown(entry: EntryRecord, config: ImportConfiguration) -> str:
    """Front matter, a blank line, the entry text, then media sections."""
    lines = front_matter(entry, config)
    lines.append("")
    lines.append(entry_body_text(entry))
    lines.extend(media_sections(entry))
    return "\n".join(lines)


def media_references(entry: EntryRecord) -> list[MediaReference]:
    """Every media item of the entry: photos, then audios, then videos."""
    return [*entry.photos, *entry.audios, *entry.videos]
