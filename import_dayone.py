"""Import a Day One export (JSON or ZIP) into a Markdown vault."""

import argparse
import logging
import sys
import tempfile
from pathlib import Path

from importer import (
    FolderVault,
    IndexMediaResolver,
    PathMediaResolver,
    find_export_json,
    import_entries,
    load_export,
    load_export_file,
    load_settings,
    save_settings,
    unzip_to_folder,
)
from importer.exceptions import DayOneImportError, ExportFormatError
from importer.settings import DEFAULT_SETTINGS_PATH, ImportConfiguration

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert a Day One export into Markdown notes with front matter.",
    )
    parser.add_argument(
        "export",
        nargs="?",
        type=Path,
        help="Day One export .json or .zip (default: first .json file in the vault)",
    )
    parser.add_argument("--vault", type=Path, required=True, help="Vault folder to import into")
    media = parser.add_mutually_exclusive_group()
    media.add_argument(
        "--media-dir",
        type=Path,
        help="Export folder holding photos/, audios/ and videos/",
    )
    media.add_argument(
        "--media-index",
        type=Path,
        help="Folder of media files to match by filename, in any layout",
    )
    parser.add_argument("--folder", help="Vault folder for imported notes (saved to settings)")
    naming = parser.add_mutually_exclusive_group()
    naming.add_argument(
        "--uuid-filenames",
        dest="use_uuid_filenames",
        action="store_true",
        default=None,
        help="Name notes by entry UUID (saved to settings)",
    )
    naming.add_argument(
        "--date-filenames",
        dest="use_uuid_filenames",
        action="store_false",
        help="Name notes YYYY-MM-DD_HH-MM-SS (saved to settings)",
    )
    for name in ("weather", "location", "tags"):
        parser.add_argument(
            f"--{name}",
            dest=f"include_{name}",
            action=argparse.BooleanOptionalAction,
            default=None,
            help=f"Include {name} in front matter (saved to settings)",
        )
    parser.add_argument(
        "--settings",
        type=Path,
        default=DEFAULT_SETTINGS_PATH,
        help=f"Settings file (default: {DEFAULT_SETTINGS_PATH})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def apply_overrides(config: ImportConfiguration, args: argparse.Namespace) -> bool:
    """Copy command-line choices onto the settings. Returns True if anything changed."""
    before = config.to_dict()
    if args.folder is not None:
        config.import_folder = args.folder
    if args.use_uuid_filenames is not None:
        config.use_uuid_filenames = args.use_uuid_filenames
    for attr in ("include_weather", "include_location", "include_tags"):
        value = getattr(args, attr)
        if value is not None:
            setattr(config, attr, value)
    return config.to_dict() != before


def _progress(idx: int, total: int, bar_width: int = 40) -> None:
    progress = idx / total
    filled = int(bar_width * progress)
    bar = "#" * filled + "-" * (bar_width - filled)
    sys.stdout.write(f"\rEntries: [{bar}] {idx}/{total}")
    if idx == total:
        sys.stdout.write("\n")
    sys.stdout.flush()


def _vault_export(vault: FolderVault) -> tuple[list, Path]:
    """Load the first JSON file found in the vault; returns (entries, its folder)."""
    json_files = [f for f in vault.list_files() if f.lower().endswith(".json")]
    if not json_files:
        raise ExportFormatError("No JSON files found in vault. Please add your Day One export JSON file.")
    name = json_files[0]
    print(f"Importing from {name}...")
    entries = load_export(vault.read(name))
    return entries, (vault.root / name).parent


def run_import(args: argparse.Namespace, config: ImportConfiguration, scratch_dir: Path) -> int:
    vault = FolderVault(args.vault)

    if args.export is None:
        entries, media_base = _vault_export(vault)
    elif args.export.suffix.lower() == ".zip":
        print(f"Extracting {args.export.name}...")
        export_dir = unzip_to_folder(args.export, scratch_dir / args.export.stem)
        export_json = find_export_json(export_dir)
        print(f"Importing from {export_json.name}...")
        entries = load_export_file(export_json)
        media_base = export_dir
    else:
        print(f"Importing from {args.export.name}...")
        entries = load_export_file(args.export)
        media_base = args.export.parent

    if args.media_index is not None:
        resolver = IndexMediaResolver.from_folder(args.media_index)
    else:
        resolver = PathMediaResolver(args.media_dir or media_base)

    report = import_entries(entries, vault, config, resolver, progress=_progress)

    print(report.summary())
    if report.media_copied or report.media_missing:
        print(f"Media copied: {report.media_copied}. Not found: {report.media_missing}.")
    if report.report_path:
        print(f"Failed entries listed in {report.report_path}")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    config = load_settings(args.settings)
    if apply_overrides(config, args):
        save_settings(config, args.settings)
        logger.info("Saved settings to %s", args.settings)

    with tempfile.TemporaryDirectory(prefix="dayone-import-") as scratch:
        try:
            return run_import(args, config, Path(scratch))
        except (DayOneImportError, OSError) as e:
            print(f"Import failed: {e}")
            return 1


if __name__ == "__main__":
    sys.exit(main())
