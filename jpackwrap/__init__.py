"""jpackwrap - package Maven-built Java applications as native installers."""

from importlib.metadata import PackageNotFoundError, version

from .core.errors import JPackWrapError
from .models import PackageResult, PackagingOptions, Platform, ProjectMetadata
from .pipeline import PackagingPipeline, create_packaging_pipeline


try:
    __version__ = version(__package__ or "jpackwrap")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "JPackWrapError",
    "PackageResult",
    "PackagingOptions",
    "PackagingPipeline",
    "Platform",
    "ProjectMetadata",
    "__version__",
    "create_packaging_pipeline",
]
