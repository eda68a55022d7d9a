"""Read project identifier and version from the Maven descriptor."""

from pathlib import Path
from xml.etree import ElementTree as ET

from pydantic import ValidationError

from jpackwrap.core.errors import IncompleteMetadataError, MissingDescriptorError
from jpackwrap.core.structlog_logger import get_struct_logger
from jpackwrap.models.project import ProjectMetadata


logger = get_struct_logger(__name__)

DESCRIPTOR_NAME = "pom.xml"


def _local_name(tag: str) -> str:
    # "{http://maven.apache.org/POM/4.0.0}artifactId" -> "artifactId"
    return tag.rsplit("}", 1)[-1]


def _child_text(root: ET.Element, name: str) -> str:
    """Text of the first direct child called ``name``, stripped, or ""."""
    for child in root:
        if isinstance(child.tag, str) and _local_name(child.tag) == name:
            return (child.text or "").strip()
    return ""


def parse_project_metadata(xml_text: str | bytes) -> ProjectMetadata:
    """Extract artifactId and version from descriptor XML.

    Pass bytes to let the XML declaration pick the encoding.

    Only direct children of ``<project>`` count, so the coordinates of the
    parent POM, plugins and dependencies are never picked up.

    Raises:
        IncompleteMetadataError: If the XML is malformed or a field is missing
    """
    try:
        root = ET.fromstring(xml_text)
    except (ET.ParseError, ValueError) as e:
        raise IncompleteMetadataError(f"Cannot parse {DESCRIPTOR_NAME}: {e}") from e

    name = _child_text(root, "artifactId")
    version = _child_text(root, "version")

    fields = (("artifactId", name), ("version", version))
    missing = [field for field, value in fields if not value]
    if missing:
        raise IncompleteMetadataError(
            f"{DESCRIPTOR_NAME} is missing required field(s): {', '.join(missing)}",
            context={"missing": missing},
        )

    try:
        return ProjectMetadata(name=name, version=version)
    except ValidationError as e:
        raise IncompleteMetadataError(f"Invalid project metadata: {e}") from e


def read_project_metadata(project_dir: Path) -> ProjectMetadata:
    """Locate and parse the project descriptor in ``project_dir``.

    Raises:
        MissingDescriptorError: If there is no descriptor file
        IncompleteMetadataError: If the identifier or version cannot be extracted
    """
    descriptor = project_dir / DESCRIPTOR_NAME
    if not descriptor.is_file():
        raise MissingDescriptorError(
            f"{DESCRIPTOR_NAME} not found in {project_dir}. "
            "Run jpackwrap from the root of a Maven project."
        )

    metadata = parse_project_metadata(descriptor.read_bytes())
    logger.info(
        "project_metadata_read",
        descriptor=str(descriptor),
        name=metadata.name,
        version=metadata.version,
    )
    return metadata
