"""Extract Day One export ZIPs and locate the journal JSON inside them."""

import zipfile
from pathlib import Path

from importer.exceptions import ExportFormatError


def unzip_to_folder(zip_path: str | Path, dest_folder: str | Path) -> Path:
    """Extract the ZIP to the given destination folder. Returns the destination path."""
    dest = Path(dest_folder)
    dest.mkdir(parents=True, exist_ok=True)
    try:
        with zipfile.ZipFile(zip_path, "r") as zf:
            zf.extractall(dest)
    except zipfile.BadZipFile as e:
        raise ExportFormatError(f"{zip_path} is not a valid ZIP file") from e
    except OSError as e:
        raise ExportFormatError(f"Could not open {zip_path}: {e}") from e
    return dest


def find_export_json(export_dir: str | Path) -> Path:
    """
    Return the journal JSON in an extracted export.

    Day One puts one <Journal>.json at the top of the export; the first one
    by name is used when there are several.
    """
    export_dir = Path(export_dir)
    jsons = sorted(export_dir.glob("*.json"))
    if not jsons:
        raise ExportFormatError(f"No Day One JSON found in {export_dir}")
    return jsons[0]
