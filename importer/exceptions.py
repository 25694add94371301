"""Exceptions raised while importing a Day One export."""


class DayOneImportError(Exception):
    """Base exception for import errors."""

    pass


class ExportFormatError(DayOneImportError):
    """The export file is missing or is not a readable Day One JSON document."""

    pass


class InvalidEntryError(DayOneImportError):
    """A single entry cannot be converted to a note."""

    pass


class DuplicateNoteError(DayOneImportError):
    """A note already exists at the path computed for an entry."""

    def __init__(self, path: str):
        super().__init__(f"File already exists: {path}")
        self.path = path


class VaultPathError(DayOneImportError, ValueError):
    """A vault-relative path points outside the vault folder."""

    pass
