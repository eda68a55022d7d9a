"""Info command: show what a packaging run would use."""

from pathlib import Path
from typing import Annotated

import typer

from jpackwrap.cli.app import AppContext
from jpackwrap.cli.decorators import handle_errors
from jpackwrap.cli.helpers.theme import get_themed_console
from jpackwrap.models.platform import detect_platform, resolve_platform
from jpackwrap.packaging.icons import icon_path
from jpackwrap.project.descriptor import read_project_metadata


@handle_errors
def info_command(
    ctx: typer.Context,
    project_dir: Annotated[
        Path | None,
        typer.Option("--project-dir", "-p", help="Maven project root [default: .]"),
    ] = None,
    platform: Annotated[
        str | None,
        typer.Option("--platform", help="Override the detected platform"),
    ] = None,
) -> None:
    """Show project metadata, platform, icon and configured settings."""
    app_ctx: AppContext = ctx.obj
    config = app_ctx.user_config.data
    root = (project_dir or Path.cwd()).resolve()

    metadata = read_project_metadata(root)
    target = resolve_platform(platform) if platform else detect_platform()
    icon_dir = config.icon_dir
    if not icon_dir.is_absolute():
        icon_dir = root / icon_dir
    icon = icon_path(target, config.icon, icon_dir)

    console = get_themed_console(app_ctx.icon_mode)
    console.print_info(f"Project: {metadata.name}")
    console.print_list_item(f"Version: {metadata.version}")
    console.print_list_item(f"Platform: {target.value}")
    console.print_list_item(
        f"Icon: {icon}" if icon.is_file() else f"Icon: {icon} (missing, default used)"
    )
    user_config = app_ctx.user_config
    if user_config.config_path:
        console.print_list_item(f"Config: {user_config.config_path}")
    for key in user_config.configured_keys():
        value = getattr(config, key)
        source = user_config.get_source(key)
        console.print_list_item(f"{key} = {value} ({source})", indent=2)


def register_commands(app: typer.Typer) -> None:
    """Register the info command with the main app."""
    app.command(name="info")(info_command)
