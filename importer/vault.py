"""Destination note store.

Paths are vault-relative and use '/' separators, e.g.
``Day One Import/attachments/ABC.jpg``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from importer.exceptions import VaultPathError


class Vault(Protocol):
    def exists(self, path: str) -> bool: ...

    def create_folder(self, path: str) -> None: ...

    def create(self, path: str, text: str) -> None:
        """Write a new text file. Raises FileExistsError if path exists."""
        ...

    def create_binary(self, path: str, data: bytes) -> None: ...

    def read(self, path: str) -> str: ...

    def list_files(self) -> list[str]: ...


class FolderVault:
    """A vault stored as a plain directory tree on disk."""

    def __init__(self, root: str | Path):
        self.root = Path(root)

    def _resolve(self, path: str) -> Path:
        resolved = (self.root / path).resolve()
        if not resolved.is_relative_to(self.root.resolve()):
            raise VaultPathError(f"Path escapes the vault: {path}")
        return resolved

    def exists(self, path: str) -> bool:
        return self._resolve(path).exists()

    def create_folder(self, path: str) -> None:
        self._resolve(path).mkdir(parents=True, exist_ok=True)

    def create(self, path: str, text: str) -> None:
        target = self._resolve(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        # "x" mode: never overwrite an existing note
        with open(target, "x", encoding="utf-8") as f:
            f.write(text)

    def create_binary(self, path: str, data: bytes) -> None:
        target = self._resolve(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, "xb") as f:
            f.write(data)

    def read(self, path: str) -> str:
        return self._resolve(path).read_text(encoding="utf-8")

    def list_files(self) -> list[str]:
        """All files in the vault, sorted, as vault-relative paths. Hidden folders are skipped."""
        if not self.root.exists():
            return []
        files: list[str] = []
        for f in self.root.rglob("*"):
            rel = f.relative_to(self.root)
            if any(part.startswith(".") for part in rel.parts):
                continue
            if f.is_file():
                files.append(rel.as_posix())
        return sorted(files)
