"""Build front matter lines from an entry's metadata."""

from importer.models import EntryRecord
from importer.settings import ImportConfiguration


def format_number(value: float | int) -> str:
    """Render a JSON number as written in the export (20.0 -> 20)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def get_flags(entry: EntryRecord) -> list[str]:
    lines: list[str] = []
    if entry.starred:
        lines.append("starred: true")
    if entry.is_pinned:
        lines.append("pinned: true")
    if entry.is_all_day:
        lines.append("all-day: true")
    return lines


def get_tags(entry: EntryRecord) -> list[str]:
    """Tags as an inline list, unquoted, in export order."""
    if entry.tags is None:
        return []
    return [f"tags: [{', '.join(entry.tags)}]"]


def get_location(entry: EntryRecord) -> list[str]:
    """Place name, city, country and coordinates, each only when set."""
    loc = entry.location
    if loc is None:
        return []

    lines: list[str] = []
    for key, value in (
        ("location", loc.place_name),
        ("city", loc.locality_name),
        ("country", loc.country),
    ):
        if value:
            lines.append(f'{key}: "{value}"')
    if loc.latitude is not None and loc.longitude is not None:
        lines.append(f"coordinates: [{format_number(loc.latitude)}, {format_number(loc.longitude)}]")
    return lines


def get_weather(entry: EntryRecord) -> list[str]:
    we = entry.weather
    if we is None:
        return []

    lines: list[str] = []
    if we.weather_code:
        lines.append(f'weather: "{we.weather_code}"')
    # 0 degrees is a reading, not a missing value
    if we.temperature_celsius is not None:
        lines.append(f"temperature: {format_number(we.temperature_celsius)}")
    return lines


def front_matter(entry: EntryRecord, config: ImportConfiguration) -> list[str]:
    """
    Return the front matter block, delimiters included.

    Field order is fixed: date, modified, flags, tags, location fields,
    weather fields. Disabled or missing fields are left out.
    """
    lines = [
        "---",
        f"date: {entry.creation_date}",
        f"modified: {entry.modified_date or entry.creation_date}",
    ]
    lines.extend(get_flags(entry))
    if config.include_tags:
        lines.extend(get_tags(entry))
    if config.include_location:
        lines.extend(get_location(entry))
    if config.include_weather:
        lines.extend(get_weather(entry))
    lines.append("---")
    return lines
