"""Host platform identification."""

import platform as _platform
from enum import Enum

from jpackwrap.core.errors import UnsupportedPlatformError


class Platform(str, Enum):
    """Operating systems the packaging tool can build installers for."""

    WINDOWS = "windows"
    LINUX = "linux"
    MACOS = "macos"


_SYSTEM_NAMES: dict[str, Platform] = {
    "windows": Platform.WINDOWS,
    "linux": Platform.LINUX,
    "darwin": Platform.MACOS,
    "macos": Platform.MACOS,
}


def resolve_platform(system_name: str) -> Platform:
    """Map an OS identity as reported by ``platform.system()`` to a Platform.

    Args:
        system_name: Host identity such as "Windows", "Linux" or "Darwin"

    Returns:
        The matching Platform member

    Raises:
        UnsupportedPlatformError: For any other host identity
    """
    key = system_name.strip().lower()
    try:
        return _SYSTEM_NAMES[key]
    except KeyError:
        raise UnsupportedPlatformError(
            f"Unsupported platform: {system_name or '<unknown>'}. "
            "Supported platforms: Windows, Linux, macOS"
        ) from None


def detect_platform() -> Platform:
    """Resolve the platform of the running host."""
    return resolve_platform(_platform.system())


__all__ = ["Platform", "detect_platform", "resolve_platform"]
