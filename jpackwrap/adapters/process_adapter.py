"""Process adapter for invoking external build and packaging tools."""

import logging
import shlex
import shutil
import subprocess
from pathlib import Path
from typing import cast

from jpackwrap.core.errors import ToolNotFoundError
from jpackwrap.protocols.process_runner_protocol import ProcessRunnerProtocol
from jpackwrap.utils.stream_process import (
    DefaultOutputMiddleware,
    OutputMiddleware,
    ProcessResult,
    T,
)


logger = logging.getLogger(__name__)


class LoggerOutputMiddleware(OutputMiddleware[str]):
    """Send child output to the log instead of the terminal.

    stdout lines are logged at DEBUG, stderr lines at WARNING.
    """

    def __init__(
        self, logger: logging.Logger, stdout_prefix: str = "", stderr_prefix: str = ""
    ):
        self.logger = logger
        self.stdout_prefix = stdout_prefix
        self.stderr_prefix = stderr_prefix

    def process(self, line: str, stream_type: str) -> str:
        if stream_type == "stdout":
            self.logger.debug("%s%s", self.stdout_prefix, line)
        else:
            self.logger.warning("%s%s", self.stderr_prefix, line)
        return line


def resolve_executable(executable: str) -> str:
    """Resolve a tool name against PATH.

    ``shutil.which`` honours PATHEXT on Windows, so "mvn" finds "mvn.cmd".
    Unresolvable names are returned unchanged and fail when started.
    """
    return shutil.which(executable) or executable


class ProcessAdapter:
    """Run external tools synchronously with streamed output."""

    def is_available(self, executable: str, version_args: list[str]) -> bool:
        """Check if a tool is available by running its version check."""
        check_cmd = [resolve_executable(executable), *version_args]
        cmd_str = " ".join(shlex.quote(arg) for arg in check_cmd)

        try:
            result = subprocess.run(
                check_cmd, check=True, capture_output=True, text=True
            )
            version_line = (result.stdout or result.stderr or "").strip().splitlines()
            logger.debug(
                "%s is available: %s",
                executable,
                version_line[0] if version_line else "<no output>",
            )
            return True

        except FileNotFoundError:
            logger.warning("%s executable not found in PATH", executable)
            return False

        except subprocess.CalledProcessError as e:
            stderr = e.stderr.strip() if e.stderr else "unknown error"
            logger.warning("Probe command failed: %s - error: %s", cmd_str, stderr)
            return False

        except OSError as e:
            logger.warning("Unexpected error probing %s: %s", executable, e)
            return False

    def run(
        self,
        cmd: list[str],
        cwd: Path | None = None,
        middleware: OutputMiddleware[T] | None = None,
    ) -> ProcessResult[T]:
        """Run a command and wait for it to exit."""
        from jpackwrap.utils import stream_process

        full_cmd = [resolve_executable(cmd[0]), *cmd[1:]]
        cmd_str = " ".join(shlex.quote(arg) for arg in full_cmd)
        logger.info("Running: %s", cmd_str)

        if middleware is None:
            # Cast is needed because T is unbound at this point
            middleware = cast(OutputMiddleware[T], DefaultOutputMiddleware())

        try:
            return stream_process.run_command(full_cmd, middleware, cwd=cwd)

        except FileNotFoundError as e:
            logger.error("Executable not found: %s", cmd[0])
            raise ToolNotFoundError(cmd[0]) from e

        except PermissionError as e:
            logger.error("Executable is not runnable: %s", cmd[0])
            raise ToolNotFoundError(
                cmd[0], f"'{cmd[0]}' exists but cannot be executed: {e}"
            ) from e


def create_process_adapter() -> ProcessRunnerProtocol:
    """Factory function to create a ProcessAdapter instance.

    Example:
        >>> adapter = create_process_adapter()
        >>> if adapter.is_available("mvn", ["-v"]):
        ...     adapter.run(["mvn", "clean", "package"])
    """
    logger.debug("Creating ProcessAdapter")
    return ProcessAdapter()
