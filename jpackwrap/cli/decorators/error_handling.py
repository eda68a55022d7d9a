"""Error handling decorators for CLI commands."""

import logging
import sys
import traceback
from collections.abc import Callable
from functools import wraps
from typing import Any

import typer

from jpackwrap.cli.helpers.output import print_error_message
from jpackwrap.core.errors import JPackWrapError
from jpackwrap.core.structlog_logger import get_struct_logger


__all__ = ["format_error", "handle_errors", "print_stack_trace_if_verbose"]

logger = get_struct_logger(__name__)


def format_error(error: JPackWrapError) -> str:
    """User-facing text naming the failed stage and the tool's exit code."""
    return f"[{error.stage}] {error}"


def _icon_mode_from_args(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    ctx = kwargs.get("ctx") or next(
        (arg for arg in args if isinstance(arg, typer.Context)), None
    )
    obj = getattr(ctx, "obj", None)
    return getattr(obj, "icon_mode", "emoji")


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to turn jpackwrap errors into a message and exit code 1.

    Args:
        func: The command function to decorate

    Returns:
        Decorated function with error handling
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except JPackWrapError as e:
            logger.debug(
                "command_failed",
                stage=e.stage,
                error=e.message,
                exit_code=e.exit_code,
                error_type=type(e).__name__,
            )
            print_error_message(format_error(e), _icon_mode_from_args(args, kwargs))
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e
        except typer.Exit:
            raise
        except Exception as e:
            exc_info = logging.getLogger().isEnabledFor(logging.DEBUG)
            logger.error("unexpected_error", error=str(e), exc_info=exc_info)
            print_error_message(
                f"Unexpected error: {e}", _icon_mode_from_args(args, kwargs)
            )
            print_stack_trace_if_verbose()
            raise typer.Exit(1) from e

    return wrapper


def print_stack_trace_if_verbose() -> None:
    """Print stack trace if verbose/debug mode is enabled."""
    if any(arg in sys.argv for arg in ["-v", "-vv", "--verbose", "--debug"]):
        print("\nStack trace:", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
