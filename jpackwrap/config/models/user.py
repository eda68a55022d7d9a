"""User configuration models."""

from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from jpackwrap.models.options import (
    DEFAULT_DESCRIPTION,
    DEFAULT_ICON,
    DEFAULT_LICENSE_FILE,
    DEFAULT_VENDOR,
)


class UserConfigData(BaseSettings):
    """User configuration data model with automatic environment variable support.

    Precedence order (highest to lowest):
    1. Environment variables (JPACKWRAP_*)
    2. Constructor arguments (config file data)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="JPACKWRAP_",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: Any,
        env_settings: Any,
        dotenv_settings: Any,
        file_secret_settings: Any,
    ) -> tuple[Any, ...]:
        """Environment variables override config file values."""
        return (env_settings, init_settings)

    log_level: str = Field(default="WARNING", description="Default log level")
    icon_mode: Literal["emoji", "text"] = Field(
        default="emoji", description="Icon style for console output"
    )

    # Packaging defaults, overridden by CLI options
    vendor: str = DEFAULT_VENDOR
    description: str = DEFAULT_DESCRIPTION
    license_file: Path = Path(DEFAULT_LICENSE_FILE)
    icon: str = DEFAULT_ICON
    icon_dir: Path = Field(
        default=Path("icons"), description="Icon directory, relative to the project"
    )
    output_dir: Path | None = None
    installer_type: str | None = None
    installer_name: str | None = None

    # External tools
    build_tool: str = "mvn"
    packaging_tool: str = "jpackage"
    skip_tests: bool = False

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is recognized."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        upper_v = v.strip().upper()
        if upper_v not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return upper_v

    @field_validator("build_tool", "packaging_tool")
    @classmethod
    def validate_tool(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("tool name must not be empty")
        return v.strip()
