# gitcrypt_demo/core/config_manager.py

import json
import logging
import sys
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Optional

from .decoding import DEFAULT_ENCODING

logger = logging.getLogger(__name__)

KNOWN_STYLES = ("app", "preview")


def get_resource_path(relative_path: str) -> Path:
    """
    Gets the absolute path to a bundled file, working both from source and from
    a PyInstaller executable.
    """
    try:
        # PyInstaller unpacks the bundle into a temporary folder stored in `sys._MEIPASS`.
        base_path = Path(sys._MEIPASS)
    except AttributeError:
        # Running from source: the project root is two levels up from this file's package.
        base_path = Path(__file__).resolve().parents[2]

    return base_path / relative_path


RESOURCES_PATH = get_resource_path('resources')
CONFIG_PATH = get_resource_path('config')
SETTINGS_FILE_PATH = CONFIG_PATH / 'settings.json'


@dataclass(frozen=True)
class AppSettings:
    """Everything the application needs to know before it resolves its payload."""
    primary_file: str = "Secret.txt"
    fallback_file: str = "Unsecret.txt"
    resources_dir: Path = field(default_factory=lambda: RESOURCES_PATH)
    encoding: str = DEFAULT_ENCODING
    style: str = "app"

    def with_overrides(self, **overrides) -> "AppSettings":
        """Returns a copy with every non-None override applied (used by the CLI)."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)


def load_settings(path: Optional[Path] = None) -> AppSettings:
    """
    Reads settings.json, falling back to the defaults for anything missing.

    A missing file is normal. An unreadable or malformed one is logged and ignored,
    so a bad config never stops the window from opening.
    """
    settings_path = Path(path) if path else SETTINGS_FILE_PATH
    defaults = AppSettings()

    if not settings_path.exists():
        logger.debug(f"No settings file at {settings_path}; using defaults.")
        return defaults

    try:
        with open(settings_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (IOError, json.JSONDecodeError) as e:
        logger.warning(f"Could not read {settings_path} ({e}); using defaults.")
        return defaults

    if not isinstance(data, dict):
        logger.warning(f"Settings file {settings_path} must contain a JSON object; using defaults.")
        return defaults

    style = data.get("style", defaults.style)
    if style not in KNOWN_STYLES:
        logger.warning(f"Unknown style '{style}' in settings; using '{defaults.style}'.")
        style = defaults.style

    resources_dir = defaults.resources_dir
    if data.get("resources_dir"):
        # Relative directories are relative to the settings file, not the working directory.
        resources_dir = (settings_path.parent / data["resources_dir"]).resolve()

    settings = AppSettings(
        primary_file=str(data.get("primary_file", defaults.primary_file)),
        fallback_file=str(data.get("fallback_file", defaults.fallback_file)),
        resources_dir=resources_dir,
        encoding=str(data.get("encoding", defaults.encoding)),
        style=style,
    )
    logger.info(f"Settings loaded from {settings_path}.")
    return settings
