"""Result models for packaging runs."""

from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import Field

from jpackwrap.core.structlog_logger import get_struct_logger
from jpackwrap.models.base import JPackWrapBaseModel
from jpackwrap.models.platform import Platform
from jpackwrap.models.project import BuildArtifactRef, IconRef, ProjectMetadata


logger = get_struct_logger(__name__)


class BaseResult(JPackWrapBaseModel):
    """Base class for all operation results."""

    success: bool
    timestamp: datetime = Field(default_factory=datetime.now)
    messages: list[str] = Field(default_factory=list)

    def add_message(self, message: str) -> None:
        """Add an informational message."""
        self.messages.append(message)
        logger.info("result_message_added", message=message)


class PackageResult(BaseResult):
    """Outcome of a packaging pipeline run."""

    metadata: ProjectMetadata | None = None
    platform: Platform | None = None
    artifact: BuildArtifactRef | None = None
    icon: IconRef | None = None
    installer_path: Path | None = None
    packaging_args: list[str] = Field(default_factory=list)
    dry_run: bool = False

    def get_summary(self) -> dict[str, Any]:
        """Get a summary of the result."""
        return {
            "success": self.success,
            "project": self.metadata.name if self.metadata else None,
            "version": self.metadata.version if self.metadata else None,
            "platform": self.platform,
            "artifact": str(self.artifact.path) if self.artifact else None,
            "icon": str(self.icon.path) if self.icon else None,
            "installer": str(self.installer_path) if self.installer_path else None,
            "dry_run": self.dry_run,
        }


__all__ = ["BaseResult", "PackageResult"]
