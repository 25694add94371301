"""Locate Day One media files and copy them into the vault's attachments folder.

Two sources are supported, chosen once per run:

- PathMediaResolver reads from an export folder on disk laid out as
  ``photos/``, ``audios/`` and ``videos/``.
- IndexMediaResolver looks files up by name in an index built from a folder
  the user picked, when there is no export folder to read from.

Media that cannot be found is logged and skipped; the note keeps its link.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from importer.models import MediaReference
from importer.note_paths import attachment_path
from importer.vault import Vault

logger = logging.getLogger(__name__)


def _candidate_names(media: MediaReference) -> list[str]:
    names = [media.filename]
    if media.md5_filename:
        names.append(media.md5_filename)
    return names


class MediaResolver:
    """Return the bytes for a media reference, or None when it is not available."""

    def read(self, media: MediaReference) -> bytes | None:
        raise NotImplementedError


class PathMediaResolver(MediaResolver):
    def __init__(self, base_dir: str | Path):
        self.base_dir = Path(base_dir)

    def find(self, media: MediaReference) -> Path | None:
        folder = self.base_dir / media.kind
        for name in _candidate_names(media):
            candidate = folder / name
            if candidate.is_file():
                return candidate
        return None

    def read(self, media: MediaReference) -> bytes | None:
        src = self.find(media)
        if src is None:
            return None
        return src.read_bytes()


class IndexMediaResolver(MediaResolver):
    """
    Look media up by exact filename.

    Index values may be bytes, a path to read, or an open binary file.
    """

    def __init__(self, index: Mapping[str, Any]):
        self.index = dict(index)

    @classmethod
    def from_folder(cls, folder: str | Path) -> IndexMediaResolver:
        """Index every file under folder by name. The first file found for a name wins."""
        folder = Path(folder)
        index: dict[str, Path] = {}
        for f in sorted(folder.rglob("*")):
            if f.is_file() and f.name not in index:
                index[f.name] = f
        logger.debug("Indexed %d media files under %s", len(index), folder)
        return cls(index)

    def read(self, media: MediaReference) -> bytes | None:
        for name in _candidate_names(media):
            if name not in self.index:
                continue
            source = self.index[name]
            if isinstance(source, (bytes, bytearray)):
                return bytes(source)
            if isinstance(source, (str, Path)):
                return Path(source).read_bytes()
            return source.read()
        return None


def copy_media(
    vault: Vault,
    resolver: MediaResolver,
    media: MediaReference,
    folder: str,
) -> bool:
    """
    Copy one media file to <folder>/attachments/<identifier>.<ext>.

    Returns True when a file was written. An existing destination is left
    alone. Missing or unreadable sources are logged and return False.
    """
    dest = attachment_path(folder, media.filename)
    if vault.exists(dest):
        logger.debug("Attachment already present: %s", dest)
        return False

    try:
        data = resolver.read(media)
    except OSError as e:
        logger.warning("Could not read media %s: %s", media.filename, e)
        return False
    if data is None:
        logger.info("Media not found for %s; note keeps a link to it", media.filename)
        return False

    try:
        vault.create_binary(dest, data)
    except OSError as e:
        logger.warning("Could not write %s: %s", dest, e)
        return False
    return True
