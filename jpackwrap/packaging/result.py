"""Verify that the packaging tool left an installer in the output directory."""

import shutil
from pathlib import Path
from typing import TypeAlias

from jpackwrap.core.errors import ResultVerificationError
from jpackwrap.core.structlog_logger import get_struct_logger
from jpackwrap.models.platform import Platform


logger = get_struct_logger(__name__)

INSTALLER_EXTENSIONS: dict[Platform, tuple[str, ...]] = {
    Platform.WINDOWS: (".msi", ".exe"),
    Platform.LINUX: (".deb", ".rpm"),
    Platform.MACOS: (".dmg", ".pkg"),
}

ARCHIVE_EXTENSIONS = (".jar", ".zip", ".tar", ".gz", ".tgz", ".xz", ".bz2")

# File name -> (mtime_ns, size)
OutputSnapshot: TypeAlias = dict[str, tuple[int, int]]


def _matches_product(path: Path, product_name: str) -> bool:
    name = path.name.lower()
    return name.startswith(product_name.lower())


def _file_stamp(path: Path) -> tuple[int, int]:
    stat = path.stat()
    return stat.st_mtime_ns, stat.st_size


def snapshot_output_dir(output_dir: Path) -> OutputSnapshot:
    """Record the files already in ``output_dir`` before packaging starts."""
    if not output_dir.is_dir():
        return {}
    return {
        path.name: _file_stamp(path) for path in output_dir.iterdir() if path.is_file()
    }


def installer_candidates(
    output_dir: Path,
    platform: Platform,
    product_name: str,
    previous: OutputSnapshot | None = None,
) -> list[Path]:
    """Installer-shaped files in ``output_dir``, best candidate first.

    Files named after the product rank before other installers; within a
    rank the most recently modified file comes first. Files listed in
    ``previous`` with an unchanged stamp are left over from an earlier run
    and never count.
    """
    platform = Platform(platform)
    if not output_dir.is_dir():
        return []

    previous = previous or {}
    extensions = INSTALLER_EXTENSIONS[platform]
    candidates = []
    for path in output_dir.iterdir():
        if not path.is_file():
            continue
        if previous.get(path.name) == _file_stamp(path):
            continue
        suffix = path.suffix.lower()
        if suffix in extensions:
            candidates.append(path)
        elif (
            platform is Platform.LINUX
            and suffix not in ARCHIVE_EXTENSIONS
            and _matches_product(path, product_name)
        ):
            candidates.append(path)

    def rank(path: Path) -> tuple[bool, float, str]:
        return (
            not _matches_product(path, product_name),
            -path.stat().st_mtime,
            path.name,
        )

    return sorted(candidates, key=rank)


def find_installer(
    output_dir: Path,
    platform: Platform,
    product_name: str,
    previous: OutputSnapshot | None = None,
) -> Path:
    """Return the installer the packaging tool produced.

    Raises:
        ResultVerificationError: If no new installer-shaped file exists
    """
    candidates = installer_candidates(output_dir, platform, product_name, previous)
    if not candidates:
        expected = ", ".join(INSTALLER_EXTENSIONS[Platform(platform)])
        raise ResultVerificationError(
            f"Packaging reported success but no new installer ({expected}) "
            f"was found in {output_dir}"
        )
    installer = candidates[0]
    logger.info("installer_found", path=str(installer), candidates=len(candidates))
    return installer


def apply_installer_name(installer: Path, installer_name: str) -> Path:
    """Copy ``installer`` to a fixed name next to it, keeping its suffix."""
    target = installer.with_name(f"{installer_name}{installer.suffix}")
    if target == installer:
        return installer
    shutil.copy2(installer, target)
    logger.info("installer_copied", source=str(installer), target=str(target))
    return target
