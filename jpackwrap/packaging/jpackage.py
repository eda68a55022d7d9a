"""Packaging invoker: assembles the jpackage argument list and runs it.

The argument order is fixed: common arguments first, then the optional
installer type and icon, then the platform-specific suffix. Tests rely on
that order being stable.
"""

import logging
from pathlib import Path
from typing import Any

from jpackwrap.core.errors import PackagingFailedError
from jpackwrap.models.options import PackagingOptions
from jpackwrap.models.platform import Platform
from jpackwrap.models.project import BuildArtifactRef, IconRef, ProjectMetadata
from jpackwrap.protocols import ProcessRunnerProtocol


logger = logging.getLogger(__name__)


def _windows_args(options: PackagingOptions) -> list[str]:
    flags = [
        ("--win-per-user-install", options.win_per_user_install),
        ("--win-shortcut-prompt", options.win_shortcut_prompt),
        ("--win-dir-chooser", options.win_dir_chooser),
        ("--win-menu", options.win_menu),
    ]
    return [flag for flag, enabled in flags if enabled]


def _linux_args(options: PackagingOptions, metadata: ProjectMetadata) -> list[str]:
    args = []
    if options.linux_shortcut:
        args.append("--linux-shortcut")
    package_name = options.linux_package_name or metadata.name
    args.extend(["--linux-package-name", package_name.lower()])
    return args


def _macos_args(options: PackagingOptions, metadata: ProjectMetadata) -> list[str]:
    return ["--mac-package-name", options.mac_package_name or metadata.name]


def platform_args(
    platform: Platform, options: PackagingOptions, metadata: ProjectMetadata
) -> list[str]:
    """The platform-specific tail of the argument list."""
    platform = Platform(platform)
    if platform is Platform.WINDOWS:
        return _windows_args(options)
    if platform is Platform.LINUX:
        return _linux_args(options, metadata)
    return _macos_args(options, metadata)


def build_packaging_args(
    metadata: ProjectMetadata,
    options: PackagingOptions,
    artifact: BuildArtifactRef,
    platform: Platform,
    icon: IconRef | None = None,
    output_dir: Path | None = None,
) -> list[str]:
    """Assemble the packaging tool's arguments, excluding the executable.

    Args:
        metadata: Project name and version
        options: User-supplied packaging options
        artifact: The bundled archive; its directory becomes ``--input``
        platform: Target platform, selects the argument suffix
        icon: Resolved icon, or None to let the tool use its default
        output_dir: Installer destination, defaults to ``options``' resolution

    Returns:
        Ordered argument list
    """
    dest = output_dir if output_dir is not None else options.resolve_output_dir()

    args = [
        "--name", metadata.name,
        "--app-version", metadata.version,
        "--input", str(artifact.input_dir),
        "--main-jar", artifact.file_name,
        "--main-class", options.main_class,
        "--dest", str(dest),
        "--vendor", options.vendor,
        "--description", options.description,
        "--license-file", str(options.license_file),
    ]  # fmt: skip

    if options.installer_type:
        args.extend(["--type", options.installer_type])

    if icon is not None:
        args.extend(["--icon", str(icon.path)])

    args.extend(platform_args(platform, options, metadata))
    return args


def run_packaging(
    runner: ProcessRunnerProtocol,
    args: list[str],
    packaging_tool: str = "jpackage",
    cwd: Path | None = None,
    middleware: Any | None = None,
) -> None:
    """Invoke the packaging tool with ``args``.

    Raises:
        PackagingFailedError: If the tool exits non-zero
    """
    cmd = [packaging_tool, *args]
    logger.info("Packaging with %s", packaging_tool)
    logger.debug("Packaging arguments: %s", args)

    return_code, _stdout, _stderr = runner.run(cmd, cwd=cwd, middleware=middleware)

    if return_code != 0:
        raise PackagingFailedError(
            f"{packaging_tool} failed to create the installer", exit_code=return_code
        )
