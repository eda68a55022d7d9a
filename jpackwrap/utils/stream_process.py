"""Process execution and streaming output handling.

External tools (the build tool and the packaging tool) are run as child
processes whose stdout and stderr are streamed line by line through an
``OutputMiddleware``. The middleware decides what the user sees; the caller
only gets the exit code and the processed lines back.

Example:
    ```python
    from jpackwrap.utils.stream_process import run_command, DefaultOutputMiddleware

    return_code, stdout, stderr = run_command(
        ["mvn", "clean", "package"], DefaultOutputMiddleware(stdout_prefix="[mvn] ")
    )
    ```
"""

import shlex
import subprocess
from pathlib import Path
from threading import Thread
from typing import Any, Generic, TypeAlias, TypeVar, cast


T = TypeVar("T")  # Type of processed output

# (return_code, stdout, stderr)
ProcessResult: TypeAlias = tuple[int, list[T], list[T]]


class OutputMiddleware(Generic[T]):
    """Base class for processing command output streams.

    Type parameter T represents the return type of the process method,
    allowing middleware to transform strings into other types if needed.
    Returning None drops the line from the captured output.
    """

    def process(self, line: str, stream_type: str) -> T:
        """Process a line of output from a subprocess stream.

        Args:
            line: A line of text from the process output
            stream_type: Either "stdout" or "stderr"

        Returns:
            Processed output of type T
        """
        raise NotImplementedError()


class DefaultOutputMiddleware(OutputMiddleware[str]):
    """Print every line with an optional per-stream prefix."""

    def __init__(self, stdout_prefix: str = "", stderr_prefix: str = "") -> None:
        self.stdout_prefix = stdout_prefix
        self.stderr_prefix = stderr_prefix

    def process(self, line: str, stream_type: str) -> str:
        prefix = self.stdout_prefix if stream_type == "stdout" else self.stderr_prefix
        print(f"{prefix}{line}", flush=True)
        return line


def run_command(
    cmd: str | list[str],
    middleware: OutputMiddleware[T] | None = None,
    cwd: Path | None = None,
) -> ProcessResult[T]:
    """Run a command and process its output through middleware.

    Blocks until the child exits; there is no timeout.

    Args:
        cmd: Command to run, either as a string or list of arguments
        middleware: Optional middleware for processing output, defaults to
            DefaultOutputMiddleware
        cwd: Working directory for the child process

    Returns:
        Tuple of return code, processed stdout lines and processed stderr lines

    Raises:
        FileNotFoundError: If the executable does not exist
    """
    if middleware is None:
        # Cast is needed because T is unbound at this point
        middleware = cast(OutputMiddleware[T], DefaultOutputMiddleware())

    if isinstance(cmd, str):
        cmd = shlex.split(cmd)

    process = subprocess.Popen(
        cmd,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        bufsize=1,
        cwd=str(cwd) if cwd is not None else None,
        errors="replace",
    )

    def stream_output(stream: Any, stream_type: str) -> list[T]:
        captured: list[T] = []
        for line in iter(stream.readline, ""):
            if line:
                processed = middleware.process(line.rstrip(), stream_type)
                if processed is not None:
                    captured.append(processed)
        stream.close()
        return captured

    stdout_lines: list[T] = []
    stderr_lines: list[T] = []

    stdout_thread = Thread(
        target=lambda: stdout_lines.extend(stream_output(process.stdout, "stdout")),
        daemon=True,
    )
    stderr_thread = Thread(
        target=lambda: stderr_lines.extend(stream_output(process.stderr, "stderr")),
        daemon=True,
    )
    stdout_thread.start()
    stderr_thread.start()

    return_code = process.wait()

    stdout_thread.join()
    stderr_thread.join()

    return return_code, stdout_lines, stderr_lines
