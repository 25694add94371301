"""Typed records for Day One entries, import settings and import results.

Raw entries stay plain dicts until the per-entry step calls
``EntryRecord.from_dict``, so a malformed entry fails on its own instead of
failing the whole export.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any

from importer.exceptions import InvalidEntryError

logger = logging.getLogger(__name__)

# Media kind -> (key holding the extension, default extension)
MEDIA_KINDS: dict[str, tuple[str, str]] = {
    "photos": ("type", "jpg"),
    "audios": ("format", "m4a"),
    "videos": ("type", "mp4"),
}


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def _optional_number(value: Any) -> float | int | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


@dataclasses.dataclass(frozen=True)
class MediaReference:
    identifier: str
    extension: str
    kind: str
    md5: str | None = None

    @property
    def filename(self) -> str:
        return f"{self.identifier}.{self.extension}"

    @property
    def md5_filename(self) -> str | None:
        """Alternate name used by exports that store media under its md5."""
        if not self.md5:
            return None
        return f"{self.md5}.{self.extension}"

    @classmethod
    def from_dict(cls, kind: str, item: Any) -> MediaReference:
        if not isinstance(item, dict) or not item.get("identifier"):
            raise InvalidEntryError(f"{kind} item has no identifier")
        ext_key, default_ext = MEDIA_KINDS[kind]
        return cls(
            identifier=str(item["identifier"]),
            extension=str(item.get(ext_key) or default_ext),
            kind=kind,
            md5=_optional_str(item.get("md5")),
        )


@dataclasses.dataclass(frozen=True)
class LocationRecord:
    place_name: str | None = None
    locality_name: str | None = None
    country: str | None = None
    latitude: float | int | None = None
    longitude: float | int | None = None

    @classmethod
    def from_dict(cls, loc: dict) -> LocationRecord:
        return cls(
            place_name=_optional_str(loc.get("placeName")),
            locality_name=_optional_str(loc.get("localityName")),
            country=_optional_str(loc.get("country")),
            latitude=_optional_number(loc.get("latitude")),
            longitude=_optional_number(loc.get("longitude")),
        )


@dataclasses.dataclass(frozen=True)
class WeatherRecord:
    weather_code: str | None = None
    temperature_celsius: float | int | None = None

    @classmethod
    def from_dict(cls, we: dict) -> WeatherRecord:
        return cls(
            weather_code=_optional_str(we.get("weatherCode")),
            temperature_celsius=_optional_number(we.get("temperatureCelsius")),
        )


@dataclasses.dataclass(frozen=True)
class EntryRecord:
    """One Day One entry with every optional field resolved to a value or None."""

    uuid: str
    creation_date: str
    modified_date: str | None = None
    text: str = ""
    rich_text: Any = None
    tags: list[str] | None = None
    location: LocationRecord | None = None
    weather: WeatherRecord | None = None
    starred: bool = False
    is_pinned: bool = False
    is_all_day: bool = False
    photos: list[MediaReference] = dataclasses.field(default_factory=list)
    audios: list[MediaReference] = dataclasses.field(default_factory=list)
    videos: list[MediaReference] = dataclasses.field(default_factory=list)

    @classmethod
    def from_dict(cls, entry: Any) -> EntryRecord:
        """
        Build a record from a raw export entry.

        Raises InvalidEntryError when uuid or creationDate is missing. Other
        fields with the wrong shape are dropped with a warning: tags that are
        not a list, media lists that are not lists, media items without an
        identifier. Location and weather that are not objects are treated as
        absent.
        """
        if not isinstance(entry, dict):
            raise InvalidEntryError("Entry is not an object")

        uuid = entry.get("uuid")
        if not uuid or not isinstance(uuid, str):
            raise InvalidEntryError("Entry has no uuid")
        creation_date = entry.get("creationDate")
        if not creation_date or not isinstance(creation_date, str):
            raise InvalidEntryError("Entry has no creationDate")

        tags = entry.get("tags")
        if tags is not None:
            if isinstance(tags, list):
                tags = [str(t) for t in tags]
            else:
                logger.warning("Entry %s: ignoring tags, not a list", uuid)
                tags = None

        loc = entry.get("location")
        we = entry.get("weather")

        media: dict[str, list[MediaReference]] = {}
        for kind in MEDIA_KINDS:
            items = entry.get(kind)
            if items is None:
                items = []
            if not isinstance(items, list):
                logger.warning("Entry %s: ignoring %s, not a list", uuid, kind)
                items = []
            media[kind] = []
            for item in items:
                try:
                    media[kind].append(MediaReference.from_dict(kind, item))
                except InvalidEntryError as e:
                    logger.warning("Entry %s: skipping media item: %s", uuid, e)

        return cls(
            uuid=uuid,
            creation_date=creation_date,
            modified_date=_optional_str(entry.get("modifiedDate")) or None,
            text=_optional_str(entry.get("text")) or "",
            rich_text=entry.get("richText"),
            tags=tags,
            location=LocationRecord.from_dict(loc) if isinstance(loc, dict) else None,
            weather=WeatherRecord.from_dict(we) if isinstance(we, dict) else None,
            starred=bool(entry.get("starred")),
            is_pinned=bool(entry.get("isPinned")),
            is_all_day=bool(entry.get("isAllDay")),
            photos=media["photos"],
            audios=media["audios"],
            videos=media["videos"],
        )


@dataclasses.dataclass
class ImportReport:
    """Counts and failures collected over one import run."""

    succeeded: int = 0
    skipped: int = 0
    failed: int = 0
    media_copied: int = 0
    media_missing: int = 0
    failures: list[tuple[Any, str]] = dataclasses.field(default_factory=list)
    report_path: str | None = None

    def add_failure(self, entry: Any, message: str) -> None:
        self.failed += 1
        self.failures.append((entry, message))

    def summary(self) -> str:
        return f"Imported {self.succeeded} entries. {self.skipped} skipped. {self.failed} failed."
