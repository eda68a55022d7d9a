"""Locate the dependency-bundled archive in the build output tree."""

import logging
from pathlib import Path

from jpackwrap.core.errors import ArtifactNotFoundError
from jpackwrap.models.project import BuildArtifactRef, ProjectMetadata


logger = logging.getLogger(__name__)

BUILD_OUTPUT_DIR = "target"
ARTIFACT_SUFFIX = "-jar-with-dependencies.jar"


def find_artifacts(build_dir: Path) -> list[Path]:
    """All bundled archives below ``build_dir``, in sorted path order."""
    if not build_dir.is_dir():
        return []
    return sorted(
        path
        for path in build_dir.rglob(f"*{ARTIFACT_SUFFIX}")
        if path.is_file()
    )


def locate_artifact(build_dir: Path) -> BuildArtifactRef:
    """Pick the bundled archive the packaging tool should wrap.

    If several archives qualify, the first in sorted order is used and the
    rest are reported in a warning.

    Raises:
        ArtifactNotFoundError: If no file ends with the bundled-archive suffix
    """
    matches = find_artifacts(build_dir)
    if not matches:
        raise ArtifactNotFoundError(
            f"No *{ARTIFACT_SUFFIX} found under {build_dir}. Make sure your build "
            "produces a jar with dependencies (maven-assembly-plugin with the "
            "jar-with-dependencies descriptor)."
        )

    selected = matches[0]
    if len(matches) > 1:
        logger.warning(
            "Found %d bundled archives, using %s; ignoring: %s",
            len(matches),
            selected.name,
            ", ".join(str(p) for p in matches[1:]),
        )
    logger.debug("Located build artifact: %s", selected)
    return BuildArtifactRef(path=selected)


def expected_artifact(build_dir: Path, metadata: ProjectMetadata) -> BuildArtifactRef:
    """The archive name the assembly plugin produces by default."""
    return BuildArtifactRef(
        path=build_dir / f"{metadata.name}-{metadata.version}{ARTIFACT_SUFFIX}"
    )
