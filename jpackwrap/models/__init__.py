"""Data models shared across jpackwrap."""

from .base import JPackWrapBaseModel
from .options import PackagingOptions
from .platform import Platform, detect_platform, resolve_platform
from .project import BuildArtifactRef, IconRef, ProjectMetadata
from .results import BaseResult, PackageResult


__all__ = [
    "BaseResult",
    "BuildArtifactRef",
    "IconRef",
    "JPackWrapBaseModel",
    "PackageResult",
    "PackagingOptions",
    "Platform",
    "ProjectMetadata",
    "detect_platform",
    "resolve_platform",
]
