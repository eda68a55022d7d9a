"""Protocol definition for running external tools."""

from pathlib import Path
from typing import Any, Protocol, TypeAlias, runtime_checkable


# (return_code, stdout, stderr)
ProcessOutcome: TypeAlias = tuple[int, list[str], list[str]]


@runtime_checkable
class ProcessRunnerProtocol(Protocol):
    """Narrow capability for invoking external command-line tools."""

    def is_available(self, executable: str, version_args: list[str]) -> bool:
        """Check whether a tool can be invoked.

        Args:
            executable: Tool name or path, e.g. "mvn"
            version_args: Arguments for a lightweight version check, e.g. ["-v"]

        Returns:
            True if the check ran and exited with status 0
        """
        ...

    def run(
        self,
        cmd: list[str],
        cwd: Path | None = None,
        middleware: Any | None = None,
    ) -> ProcessOutcome:
        """Run a command to completion, forwarding its output.

        Args:
            cmd: Executable followed by its arguments
            cwd: Working directory for the child process
            middleware: Optional middleware for processing output

        Returns:
            Tuple containing (return_code, stdout_lines, stderr_lines)

        Raises:
            ToolNotFoundError: If the executable cannot be started
        """
        ...
