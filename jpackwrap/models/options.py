"""Packaging options model."""

from pathlib import Path

from pydantic import Field, field_validator

from jpackwrap.models.base import JPackWrapBaseModel


DEFAULT_VENDOR = "Unknown"
DEFAULT_DESCRIPTION = "A Java application."
DEFAULT_LICENSE_FILE = "LICENSE"
DEFAULT_ICON = "appicon"


class PackagingOptions(JPackWrapBaseModel):
    """Everything the packaging tool needs besides project metadata.

    Built once from CLI options layered over user configuration and consumed
    once by the packaging step.
    """

    main_class: str = Field(description="Fully qualified entry-point class")
    vendor: str = DEFAULT_VENDOR
    description: str = DEFAULT_DESCRIPTION
    license_file: Path = Path(DEFAULT_LICENSE_FILE)
    icon: str = DEFAULT_ICON
    output_dir: Path | None = Field(
        default=None, description="Installer destination, working directory if unset"
    )
    installer_type: str | None = Field(
        default=None, description="Installer type, packaging tool default if unset"
    )
    installer_name: str | None = Field(
        default=None, description="Fixed file name (without suffix) for the installer"
    )

    # Windows
    win_per_user_install: bool = True
    win_shortcut_prompt: bool = True
    win_dir_chooser: bool = True
    win_menu: bool = True

    # Linux
    linux_shortcut: bool = True
    linux_package_name: str | None = None

    # macOS
    mac_package_name: str | None = None

    @field_validator("main_class")
    @classmethod
    def validate_main_class(cls, v: str) -> str:
        if not v:
            raise ValueError("main class must not be empty")
        return v

    def resolve_output_dir(self, cwd: Path | None = None) -> Path:
        """Return the installer destination, defaulting to the working directory."""
        if self.output_dir is not None:
            return self.output_dir
        return cwd if cwd is not None else Path.cwd()


__all__ = [
    "DEFAULT_DESCRIPTION",
    "DEFAULT_ICON",
    "DEFAULT_LICENSE_FILE",
    "DEFAULT_VENDOR",
    "PackagingOptions",
]
