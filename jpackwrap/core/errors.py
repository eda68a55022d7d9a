"""Error taxonomy for jpackwrap.

Every failure a packaging run can hit is a ``JPackWrapError`` subclass. All of
them are terminal: the CLI reports the message, the failed stage and the
external tool's exit code when there is one, then exits with status 1.
"""

from typing import Any


class JPackWrapError(Exception):
    """Base class for all jpackwrap errors."""

    stage: str = "unknown"

    def __init__(
        self,
        message: str,
        exit_code: int | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code
        self.context = context or {}

    def __str__(self) -> str:
        if self.exit_code is not None:
            return f"{self.message} (exit code {self.exit_code})"
        return self.message


class ConfigError(JPackWrapError):
    """Invalid or unreadable user configuration."""

    stage = "config"


class MissingDescriptorError(JPackWrapError):
    """The project descriptor (pom.xml) does not exist."""

    stage = "read_metadata"


class IncompleteMetadataError(JPackWrapError):
    """The project descriptor lacks a name or a version."""

    stage = "read_metadata"


class UnsupportedPlatformError(JPackWrapError):
    """The host operating system is not Windows, Linux or macOS."""

    stage = "resolve_platform"


class ToolNotFoundError(JPackWrapError):
    """An external tool could not be invoked."""

    stage = "check_tools"

    def __init__(self, tool: str, hint: str | None = None) -> None:
        self.tool = tool
        self.hint = hint or f"Make sure '{tool}' is installed and on your PATH."
        super().__init__(
            f"{tool} is not available. {self.hint}", context={"tool": tool}
        )


class BuildFailedError(JPackWrapError):
    """The build tool exited with a non-zero status."""

    stage = "build"


class ArtifactNotFoundError(JPackWrapError):
    """No dependency-bundled archive was found in the build output."""

    stage = "locate_artifact"


class PackagingFailedError(JPackWrapError):
    """The packaging tool exited with a non-zero status."""

    stage = "package"


class ResultVerificationError(JPackWrapError):
    """The packaging tool reported success but no installer was found."""

    stage = "verify_result"


__all__ = [
    "ArtifactNotFoundError",
    "BuildFailedError",
    "ConfigError",
    "IncompleteMetadataError",
    "JPackWrapError",
    "MissingDescriptorError",
    "PackagingFailedError",
    "ResultVerificationError",
    "ToolNotFoundError",
    "UnsupportedPlatformError",
]
