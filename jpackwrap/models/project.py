"""Project metadata and build artifact models."""

from pathlib import Path

from pydantic import Field, field_validator

from jpackwrap.models.base import JPackWrapBaseModel


class ProjectMetadata(JPackWrapBaseModel):
    """Identifier and version taken from the project descriptor."""

    name: str = Field(description="Project identifier (artifactId)")
    version: str = Field(description="Project version")

    @field_validator("name", "version")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("must not be empty")
        return v


class BuildArtifactRef(JPackWrapBaseModel):
    """The single dependency-bundled archive produced by the build."""

    path: Path

    @property
    def file_name(self) -> str:
        return self.path.name

    @property
    def input_dir(self) -> Path:
        """Directory handed to the packaging tool as its input."""
        return self.path.parent


class IconRef(JPackWrapBaseModel):
    """An icon file that exists on disk."""

    path: Path


__all__ = ["BuildArtifactRef", "IconRef", "ProjectMetadata"]
