"""Availability checks for the external build and packaging tools."""

from jpackwrap.core.errors import ToolNotFoundError
from jpackwrap.core.structlog_logger import get_struct_logger
from jpackwrap.protocols import ProcessRunnerProtocol


logger = get_struct_logger(__name__)

# Version check arguments per known tool
VERSION_ARGS: dict[str, list[str]] = {
    "mvn": ["-v"],
    "jpackage": ["--version"],
}


def version_args_for(tool: str) -> list[str]:
    """Probe arguments for ``tool``, matched on the executable's base name."""
    base = tool.replace("\\", "/").rsplit("/", 1)[-1].lower()
    for suffix in (".cmd", ".bat", ".exe"):
        if base.endswith(suffix):
            base = base[: -len(suffix)]
            break
    return VERSION_ARGS.get(base, ["--version"])


def tool_status(runner: ProcessRunnerProtocol, tools: list[str]) -> dict[str, bool]:
    """Probe every tool and report which ones answered."""
    status: dict[str, bool] = {}
    for tool in tools:
        try:
            status[tool] = runner.is_available(tool, version_args_for(tool))
        except Exception as e:
            # Fail closed: an unexpected check error counts as unavailable
            logger.warning("tool_check_error", tool=tool, error=str(e))
            status[tool] = False
    return status


def check_tools(runner: ProcessRunnerProtocol, tools: list[str]) -> None:
    """Ensure every tool in ``tools`` can be invoked, in order.

    Raises:
        ToolNotFoundError: For the first tool whose version check fails
    """
    for tool, available in tool_status(runner, tools).items():
        if not available:
            raise ToolNotFoundError(tool)
        logger.debug("tool_available", tool=tool)
