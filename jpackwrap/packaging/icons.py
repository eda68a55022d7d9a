"""Resolve the per-platform application icon."""

import logging
from pathlib import Path

from jpackwrap.models.platform import Platform
from jpackwrap.models.project import IconRef


logger = logging.getLogger(__name__)

ICON_DIR = Path("icons")

ICON_EXTENSIONS: dict[Platform, str] = {
    Platform.WINDOWS: ".ico",
    Platform.LINUX: ".png",
    Platform.MACOS: ".icns",
}


def icon_path(platform: Platform, icon_name: str, icon_dir: Path = ICON_DIR) -> Path:
    return icon_dir / f"{icon_name}{ICON_EXTENSIONS[Platform(platform)]}"


def resolve_icon(
    platform: Platform, icon_name: str, icon_dir: Path = ICON_DIR
) -> IconRef | None:
    """Return the icon for ``platform`` if it exists, otherwise None.

    A missing icon is not an error: the packaging tool falls back to its own
    default icon.
    """
    path = icon_path(platform, icon_name, icon_dir)
    if not path.is_file():
        logger.warning("Icon not found at %s, using the default icon", path)
        return None
    return IconRef(path=path)
