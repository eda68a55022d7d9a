"""Package command: build the project and create a native installer."""

import logging
from pathlib import Path
from typing import Annotated, Any

import typer
from pydantic import ValidationError

from jpackwrap.adapters import LoggerOutputMiddleware, create_process_adapter
from jpackwrap.cli.app import AppContext
from jpackwrap.cli.decorators import handle_errors
from jpackwrap.cli.helpers import print_package_result
from jpackwrap.config.models import UserConfigData
from jpackwrap.core.errors import ConfigError
from jpackwrap.models.options import PackagingOptions
from jpackwrap.pipeline import create_packaging_pipeline


logger = logging.getLogger(__name__)


def build_packaging_options(
    config: UserConfigData, main_class: str, **overrides: Any
) -> PackagingOptions:
    """Layer CLI overrides (None means not given) over configured defaults.

    Raises:
        ConfigError: If the combined options fail validation
    """
    values: dict[str, Any] = {
        "vendor": config.vendor,
        "description": config.description,
        "license_file": config.license_file,
        "icon": config.icon,
        "output_dir": config.output_dir,
        "installer_type": config.installer_type,
        "installer_name": config.installer_name,
    }
    values.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return PackagingOptions(main_class=main_class, **values)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise ConfigError(f"Invalid packaging options: {problems}") from e


@handle_errors
def package_command(
    ctx: typer.Context,
    main_class: Annotated[
        str,
        typer.Argument(help="Fully qualified main class, e.g. com.example.Main"),
    ],
    license_file: Annotated[
        Path | None,
        typer.Option("--license-file", "-l", help="License file [default: LICENSE]"),
    ] = None,
    icon: Annotated[
        str | None,
        typer.Option(
            "--icon",
            help=(
                "Icon base name, looked up as icons/<name>.ico|.png|.icns "
                "[default: appicon]"
            ),
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option(
            "--output-dir",
            "-o",
            help="Installer destination [default: current directory]",
        ),
    ] = None,
    vendor: Annotated[
        str | None, typer.Option("--vendor", help="Vendor name [default: Unknown]")
    ] = None,
    description: Annotated[
        str | None,
        typer.Option(
            "--description",
            help='Application description [default: "A Java application."]',
        ),
    ] = None,
    installer_type: Annotated[
        str | None,
        typer.Option("--type", help="Installer type (msi, exe, deb, rpm, dmg, pkg)"),
    ] = None,
    installer_name: Annotated[
        str | None,
        typer.Option(
            "--installer-name", help="Also copy the installer to this fixed file name"
        ),
    ] = None,
    skip_tests: Annotated[
        bool | None,
        typer.Option("--skip-tests/--run-tests", help="Skip tests during the build"),
    ] = None,
    project_dir: Annotated[
        Path | None,
        typer.Option("--project-dir", "-p", help="Maven project root [default: .]"),
    ] = None,
    platform: Annotated[
        str | None,
        typer.Option(
            "--platform", help="Override the detected platform (windows, linux, macos)"
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run", help="Print the packaging arguments without building"
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Send tool output to the log instead"),
    ] = False,
) -> None:
    """Build the project with Maven and package it with jpackage.

    Runs `mvn clean package`, picks up the *-jar-with-dependencies.jar from
    target/, and creates a native installer for the current platform.
    """
    app_ctx: AppContext = ctx.obj
    config = app_ctx.user_config.data

    options = build_packaging_options(
        config,
        main_class,
        license_file=license_file,
        icon=icon,
        output_dir=output_dir,
        vendor=vendor,
        description=description,
        installer_type=installer_type,
        installer_name=installer_name,
    )

    pipeline = create_packaging_pipeline(
        runner=create_process_adapter(),
        platform=platform,
        project_dir=project_dir,
        build_tool=config.build_tool,
        packaging_tool=config.packaging_tool,
        skip_tests=config.skip_tests if skip_tests is None else skip_tests,
        icon_dir=config.icon_dir,
        middleware=LoggerOutputMiddleware(logger) if quiet else None,
    )
    result = pipeline.run(options, dry_run=dry_run)
    print_package_result(result, app_ctx.icon_mode)


def register_commands(app: typer.Typer) -> None:
    """Register the package command with the main app."""
    app.command(name="package")(package_command)
