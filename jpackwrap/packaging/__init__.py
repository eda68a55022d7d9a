"""The individual packaging stages."""

from .artifacts import ARTIFACT_SUFFIX, BUILD_OUTPUT_DIR, locate_artifact
from .build import run_build
from .icons import ICON_EXTENSIONS, resolve_icon
from .jpackage import build_packaging_args, run_packaging
from .result import (
    INSTALLER_EXTENSIONS,
    apply_installer_name,
    find_installer,
    snapshot_output_dir,
)
from .tools import check_tools, tool_status


__all__ = [
    "ARTIFACT_SUFFIX",
    "BUILD_OUTPUT_DIR",
    "ICON_EXTENSIONS",
    "INSTALLER_EXTENSIONS",
    "apply_installer_name",
    "build_packaging_args",
    "check_tools",
    "find_installer",
    "locate_artifact",
    "resolve_icon",
    "run_build",
    "run_packaging",
    "snapshot_output_dir",
    "tool_status",
]
