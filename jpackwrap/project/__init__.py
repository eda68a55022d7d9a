"""Project descriptor handling."""

from .descriptor import DESCRIPTOR_NAME, parse_project_metadata, read_project_metadata


__all__ = ["DESCRIPTOR_NAME", "parse_project_metadata", "read_project_metadata"]
