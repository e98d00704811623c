# gitcrypt_demo/gui/resources.py

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtGui import QColor, QIcon, QPainter, QPixmap

from gitcrypt_demo.core.config_manager import get_resource_path, RESOURCES_PATH

# A dedicated logger for asset-related events.
logger = logging.getLogger(__name__)

ASSETS_PATH = get_resource_path('assets')
ICONS_PATH = ASSETS_PATH / 'icons'

# Every icon the application expects to find in assets/icons.
REQUIRED_ICONS = ["app_icon", "globe"]
# Used whenever a specific icon is missing, so a bad checkout never crashes the window.
FALLBACK_ICON_NAME = "app_icon"

_icon_cache = {}


def validate_assets(resources_dir: Optional[Path] = None) -> bool:
    """
    Warns early about missing icons or a missing resource directory.

    Args:
        resources_dir: The directory the window will actually read from;
            defaults to the bundled one.

    Returns:
        True if everything was found.
    """
    logger.info("Validating GUI assets...")
    resources_dir = Path(resources_dir) if resources_dir else RESOURCES_PATH
    all_found = True

    missing_icons = [name for name in REQUIRED_ICONS if not (ICONS_PATH / f"{name}.svg").exists()]
    if missing_icons:
        logger.warning(f"Missing required icons in '{ICONS_PATH}': {', '.join(missing_icons)}")
        all_found = False
    else:
        logger.info("All required icons found.")

    if not resources_dir.is_dir():
        logger.warning(f"Resources directory not found at: {resources_dir}")
        all_found = False

    return all_found


def get_icon(name: str) -> QIcon:
    """Creates and caches a QIcon from an SVG file, with a fallback for missing icons."""
    if name in _icon_cache:
        return _icon_cache[name]

    icon_path = ICONS_PATH / f"{name}.svg"
    if not icon_path.exists():
        logger.warning(f"Icon '{name}.svg' not found. Using fallback.")
        # A missing fallback icon must not recurse forever.
        if name == FALLBACK_ICON_NAME:
            return QIcon()
        return get_icon(FALLBACK_ICON_NAME)

    icon = QIcon(str(icon_path))
    _icon_cache[name] = icon
    return icon


def tinted_pixmap(name: str, color: str, size: int) -> QPixmap:
    """Renders an icon at `size` x `size` pixels, recoloured to `color`."""
    pixmap = get_icon(name).pixmap(size, size)
    if pixmap.isNull():
        return pixmap

    painter = QPainter(pixmap)
    # SourceIn keeps the icon's shape (its alpha) and replaces its colour.
    painter.setCompositionMode(QPainter.CompositionMode_SourceIn)
    painter.fillRect(pixmap.rect(), QColor(color))
    painter.end()
    return pixmap
