"""Main CLI application for jpackwrap."""

import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Annotated

import typer

from jpackwrap.cli.decorators.error_handling import print_stack_trace_if_verbose
from jpackwrap.cli.helpers.output import print_error_message
from jpackwrap.config.user_config import UserConfig, create_user_config
from jpackwrap.core.errors import ConfigError
from jpackwrap.core.logging import setup_logging


__all__ = ["AppContext", "app", "main", "__version__"]


try:
    __version__ = version("jpackwrap")
except PackageNotFoundError:
    __version__ = "0.0.0"

logger = logging.getLogger(__name__)


class AppContext:
    """Application context for storing shared state."""

    def __init__(
        self,
        verbose: int = 0,
        log_file: str | None = None,
        config_file: str | None = None,
        no_emoji: bool = False,
        user_config: UserConfig | None = None,
    ):
        """Initialize AppContext.

        Args:
            verbose: Verbosity level
            log_file: Path to log file
            config_file: Path to configuration file
            no_emoji: Whether to disable emoji icons
            user_config: Preloaded configuration, loaded from config_file if None
        """
        self.verbose = verbose
        self.log_file = log_file
        self.config_file = config_file
        self.no_emoji = no_emoji
        self.user_config = user_config or create_user_config(
            cli_config_path=config_file
        )

    @property
    def icon_mode(self) -> str:
        """Icon mode; the --no-emoji flag beats the config file."""
        if self.no_emoji:
            return "text"
        return self.user_config.data.icon_mode


app = typer.Typer(
    name="jpackwrap",
    help=f"""jpackwrap v{__version__}

Package a Maven-built Java application into a native installer:

  mvn clean package → *-jar-with-dependencies.jar → jpackage → installer

Common workflows:
  • Build an installer:  jpackwrap package com.example.Main --vendor "ACME"
  • Preview arguments:   jpackwrap package com.example.Main --dry-run
  • Check tools:         jpackwrap check""",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "-v",
            "--verbose",
            count=True,
            help="Increase verbosity (-v=INFO, -vv=DEBUG)",
        ),
    ] = 0,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging (equivalent to -vv)"),
    ] = False,
    log_file: Annotated[
        str | None, typer.Option("--log-file", help="Log to file")
    ] = None,
    config_file: Annotated[
        str | None,
        typer.Option("-c", "--config", help="Path to configuration file"),
    ] = None,
    no_emoji: Annotated[
        bool,
        typer.Option("--no-emoji", help="Disable emoji icons in output"),
    ] = False,
    show_version: Annotated[
        bool, typer.Option("--version", help="Show version and exit")
    ] = False,
) -> None:
    """jpackwrap: Java application installer builder."""
    if show_version:
        print(f"jpackwrap v{__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        print(ctx.get_help())
        raise typer.Exit()

    try:
        app_context = AppContext(
            verbose=verbose,
            log_file=log_file,
            config_file=config_file,
            no_emoji=no_emoji,
        )
    except ConfigError as e:
        print_error_message(f"[config] {e}", "text" if no_emoji else "emoji")
        raise typer.Exit(1) from e
    ctx.obj = app_context

    log_level = logging.WARNING
    if debug:
        log_level = logging.DEBUG
    elif verbose == 1:
        log_level = logging.INFO
    elif verbose >= 2:
        log_level = logging.DEBUG
    else:
        log_level = app_context.user_config.get_log_level_int()

    setup_logging(level=log_level, log_file=log_file)
    logger.debug("Configuration file: %s", app_context.user_config.config_path)


def main() -> int:
    """Main CLI entry point."""
    try:
        from jpackwrap.cli.commands import register_all_commands

        register_all_commands(app)
        app()
        return 0

    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0

    except Exception as e:
        logger.exception("Unexpected error: %s", e)
        print_stack_trace_if_verbose()
        return 1


if __name__ == "__main__":
    sys.exit(main())
