"""CLI command modules."""

import typer

from jpackwrap.cli.commands.check import register_commands as register_check_commands
from jpackwrap.cli.commands.info import register_commands as register_info_commands
from jpackwrap.cli.commands.package import (
    register_commands as register_package_commands,
)


def register_all_commands(app: typer.Typer) -> None:
    """Register all CLI commands with the main app.

    Calling this more than once is harmless.
    """
    registered = {command.name for command in app.registered_commands}
    if "package" not in registered:
        register_package_commands(app)
    if "check" not in registered:
        register_check_commands(app)
    if "info" not in registered:
        register_info_commands(app)
