"""Day One to Markdown vault importer."""

from importer.media import IndexMediaResolver, PathMediaResolver
from importer.run import import_entries
from importer.schema import load_export, load_export_file, read_entries
from importer.settings import ImportConfiguration, load_settings, save_settings
from importer.vault import FolderVault
from importer.zip_handler import find_export_json, unzip_to_folder

__all__ = [
    "import_entries",
    "load_export",
    "load_export_file",
    "read_entries",
    "ImportConfiguration",
    "load_settings",
    "save_settings",
    "FolderVault",
    "IndexMediaResolver",
    "PathMediaResolver",
    "find_export_json",
    "unzip_to_folder",
]
