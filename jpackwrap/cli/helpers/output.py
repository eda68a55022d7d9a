"""Helper functions for CLI output formatting with Rich integration."""

from jpackwrap.cli.helpers.theme import get_themed_console
from jpackwrap.models.results import PackageResult


def print_success_message(message: str, icon_mode: str = "emoji") -> None:
    get_themed_console(icon_mode).print_success(message)


def print_error_message(message: str, icon_mode: str = "emoji") -> None:
    get_themed_console(icon_mode, stderr=True).print_error(message)


def print_list_item(item: str, indent: int = 1, icon_mode: str = "emoji") -> None:
    get_themed_console(icon_mode).print_list_item(item, indent)


def print_package_result(result: PackageResult, icon_mode: str = "emoji") -> None:
    """Print the outcome of a packaging run.

    A dry run prints the command that would be executed; a real run prints
    the installer path.
    """
    console = get_themed_console(icon_mode)
    for message in result.messages:
        console.print_info(message)

    if result.dry_run:
        console.print_info("Dry run, packaging arguments:")
        for arg in result.packaging_args:
            console.print_list_item(arg)
        return

    if result.installer_path is not None:
        console.print_success(f"Installer ready: {result.installer_path}")
