"""
User configuration management for jpackwrap.

Configuration is resolved from several sources:
1. Environment variables (highest precedence)
2. Command-line provided config file
3. Config file in current directory
4. User's XDG config directory
5. Default values (lowest precedence)
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from jpackwrap.config.models import UserConfigData
from jpackwrap.core.errors import ConfigError


logger = logging.getLogger(__name__)

ENV_PREFIX = "JPACKWRAP_"

_LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def load_yaml_config(path: Path) -> dict[str, Any]:
    """Read a YAML config file into a dictionary.

    An empty file yields an empty dictionary.

    Raises:
        ConfigError: If the file cannot be read, is not valid YAML or is not a mapping
    """
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return data


class UserConfig:
    """Manages user-specific configuration for jpackwrap."""

    def __init__(self, cli_config_path: str | Path | None = None):
        """
        Initialize the user configuration handler.

        Args:
            cli_config_path: Optional config file path provided via CLI
        """
        self._config_sources: dict[str, str] = {}
        self._cli_config_path = (
            Path(cli_config_path).expanduser().resolve() if cli_config_path else None
        )
        self._config_paths = self._generate_config_paths()
        self.config_path: Path | None = None
        self._load_config()

    def _generate_config_paths(self) -> list[Path]:
        """Generate a list of config paths to search in order of precedence."""
        config_paths = []

        if self._cli_config_path:
            config_paths.append(self._cli_config_path)

        config_paths.extend(
            [Path.cwd() / "jpackwrap.yaml", Path.cwd() / ".jpackwrap.yml"]
        )

        xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
        config_root = (
            Path(xdg_config_home) if xdg_config_home else Path.home() / ".config"
        )
        config_paths.extend(
            [
                config_root / "jpackwrap" / "config.yaml",
                config_root / "jpackwrap" / "config.yml",
            ]
        )
        return config_paths

    def _load_config(self) -> None:
        """Load configuration from the first config file found and the environment."""
        logger.debug("Config search paths: %s", [str(p) for p in self._config_paths])

        if self._cli_config_path and not self._cli_config_path.exists():
            raise ConfigError(f"Config file not found: {self._cli_config_path}")

        config_data: dict[str, Any] = {}
        for path in self._config_paths:
            if path.is_file():
                config_data = load_yaml_config(path)
                self.config_path = path
                logger.debug("Loaded user configuration from %s", path)
                break
        else:
            logger.debug("No user configuration file found, using defaults")

        try:
            self._config = UserConfigData(**config_data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e

        if self.config_path:
            for key in config_data:
                if key in UserConfigData.model_fields:
                    self._config_sources[key] = f"file:{self.config_path.name}"
        self._track_env_var_sources()

    def _track_env_var_sources(self) -> None:
        """Track which configuration values came from environment variables."""
        for env_name in os.environ:
            if not env_name.upper().startswith(ENV_PREFIX):
                continue
            config_key = env_name[len(ENV_PREFIX) :].lower()
            if config_key in UserConfigData.model_fields:
                self._config_sources[config_key] = "environment"

    @property
    def data(self) -> UserConfigData:
        return self._config

    def get_source(self, key: str) -> str:
        """
        Get the source of a configuration value.

        Returns:
            One of "environment", "file:<name>" or "default"
        """
        return self._config_sources.get(key, "default")

    def configured_keys(self) -> list[str]:
        """Keys set by a config file or the environment, in model field order."""
        fields = UserConfigData.model_fields
        return [key for key in fields if key in self._config_sources]

    def get_log_level_int(self) -> int:
        """Get the configured log level as a ``logging`` constant."""
        return _LOG_LEVELS.get(self._config.log_level.upper(), logging.WARNING)


def create_user_config(cli_config_path: str | Path | None = None) -> UserConfig:
    """Create a UserConfig instance.

    Args:
        cli_config_path: Optional config file path provided via CLI

    Returns:
        Configured UserConfig instance
    """
    return UserConfig(cli_config_path=cli_config_path)
