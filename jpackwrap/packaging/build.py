"""Build invoker: runs the build tool's clean-and-package lifecycle."""

from pathlib import Path
from typing import Any

from jpackwrap.core.errors import BuildFailedError
from jpackwrap.core.structlog_logger import get_struct_logger
from jpackwrap.protocols import ProcessRunnerProtocol


logger = get_struct_logger(__name__)

BUILD_GOALS = ["clean", "package"]


def build_command(build_tool: str = "mvn", skip_tests: bool = False) -> list[str]:
    cmd = [build_tool, *BUILD_GOALS]
    if skip_tests:
        cmd.append("-DskipTests")
    return cmd


def run_build(
    runner: ProcessRunnerProtocol,
    project_dir: Path,
    build_tool: str = "mvn",
    skip_tests: bool = False,
    middleware: Any | None = None,
) -> None:
    """Run the build in ``project_dir``, forwarding its output.

    Only the exit code is authoritative; the output is never parsed.

    Raises:
        BuildFailedError: If the build tool exits non-zero
    """
    cmd = build_command(build_tool, skip_tests)
    logger.info("build_started", command=cmd, project_dir=str(project_dir))

    return_code, _stdout, _stderr = runner.run(
        cmd, cwd=project_dir, middleware=middleware
    )

    if return_code != 0:
        raise BuildFailedError(
            f"Build failed: {' '.join(cmd)}", exit_code=return_code
        )
    logger.info("build_completed")
