"""Check command: report whether the external tools can be invoked."""

import typer
from rich.console import Console

from jpackwrap.adapters import create_process_adapter
from jpackwrap.cli.app import AppContext
from jpackwrap.cli.decorators import handle_errors
from jpackwrap.cli.helpers.theme import (
    JPACKWRAP_THEME,
    create_status_table,
    format_availability_status,
)
from jpackwrap.core.errors import ToolNotFoundError
from jpackwrap.packaging.tools import tool_status, version_args_for


@handle_errors
def check_command(ctx: typer.Context) -> None:
    """Check that the build tool and the packaging tool are on PATH."""
    app_ctx: AppContext = ctx.obj
    config = app_ctx.user_config.data
    tools = [config.build_tool, config.packaging_tool]

    status = tool_status(create_process_adapter(), tools)

    table = create_status_table("External Tools", "SYSTEM", app_ctx.icon_mode)
    for tool, available in status.items():
        table.add_row(
            tool,
            format_availability_status(available, app_ctx.icon_mode),
            f"{tool} {' '.join(version_args_for(tool))}",
        )
    Console(theme=JPACKWRAP_THEME, soft_wrap=True).print(table)

    missing = [tool for tool, available in status.items() if not available]
    if missing:
        raise ToolNotFoundError(missing[0])


def register_commands(app: typer.Typer) -> None:
    """Register the check command with the main app."""
    app.command(name="check")(check_command)
