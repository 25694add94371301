"""Import settings, persisted as a small JSON file between runs."""

from __future__ import annotations

import dataclasses
import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS_PATH = Path.home() / ".config" / "dayone-importer" / "settings.json"

# Settings file key -> ImportConfiguration attribute
_KEYS: dict[str, str] = {
    "importFolder": "import_folder",
    "dateFormat": "date_format",
    "useUuidFilenames": "use_uuid_filenames",
    "includeWeather": "include_weather",
    "includeLocation": "include_location",
    "includeTags": "include_tags",
}


@dataclasses.dataclass
class ImportConfiguration:
    import_folder: str = "Day One Import"
    # Stored and shown, but filenames always use YYYY-MM-DD.
    date_format: str = "YYYY-MM-DD"
    use_uuid_filenames: bool = False
    include_weather: bool = True
    include_location: bool = True
    include_tags: bool = True

    @classmethod
    def from_dict(cls, data: dict) -> ImportConfiguration:
        """Merge a saved settings dict over the defaults. Unknown keys are ignored."""
        config = cls()
        for key, attr in _KEYS.items():
            if key not in data:
                continue
            default = getattr(config, attr)
            value = data[key]
            if not isinstance(value, type(default)):
                logger.warning("Ignoring setting %s with unexpected value %r", key, value)
                continue
            setattr(config, attr, value)
        return config

    def to_dict(self) -> dict:
        return {key: getattr(self, attr) for key, attr in _KEYS.items()}


def load_settings(path: str | Path = DEFAULT_SETTINGS_PATH) -> ImportConfiguration:
    """Load settings from path, falling back to defaults when it is missing or unreadable."""
    path = Path(path)
    if not path.exists():
        return ImportConfiguration()
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Could not read settings from %s: %s", path, e)
        return ImportConfiguration()
    if not isinstance(data, dict):
        return ImportConfiguration()
    return ImportConfiguration.from_dict(data)


def save_settings(config: ImportConfiguration, path: str | Path = DEFAULT_SETTINGS_PATH) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config.to_dict(), f, indent=2, ensure_ascii=False)
