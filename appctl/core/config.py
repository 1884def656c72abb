"""
Configuration Management.

Loads settings from config/settings/*.yaml and environment overrides
from APPCTL_* variables (optionally placed in config/.env).

Settings (YAML):
    application.yaml   - Client identity, target endpoint, timeouts
    logging.yaml       - Logging configuration

Environment:
    APPCTL_TARGET      - Overrides target.url
    APPCTL_TIMEOUT     - Overrides timeouts.request (seconds)
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from appctl.core.config_schema import ApplicationSchema, LoggingSchema
from appctl.core.exceptions import ConfigurationError


def find_project_root() -> Path:
    """Find project root by looking for .project_root marker file."""
    current = Path.cwd()
    while current != current.parent:
        if (current / ".project_root").exists():
            return current
        current = current.parent
    raise RuntimeError("Project root not found. Ensure .project_root file exists.")


def validate_project_root() -> Path:
    """
    Validate that the project root can be found.

    Raises SystemExit with a clear message if .project_root is not found.
    Use this in entry scripts before any configuration loading.
    """
    try:
        return find_project_root()
    except RuntimeError as e:
        raise SystemExit(f"Error: {e}") from e


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Load a YAML configuration file from config/settings/."""
    project_root = find_project_root()
    config_path = project_root / "config" / "settings" / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


class Settings(BaseSettings):
    """Environment overrides. Unset values fall back to application.yaml."""

    target: str | None = None
    timeout: float | None = None

    model_config = SettingsConfigDict(
        env_prefix="APPCTL_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def _load_validated(schema_cls: type, filename: str) -> Any:
    """Load YAML and validate against schema. Returns typed model instance."""
    raw = load_yaml_config(filename)
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ValueError(
            f"Invalid configuration in {filename}:\n{e}"
        ) from e


class AppConfig:
    """
    Application configuration loaded from YAML files.

    Each YAML file is validated against its Pydantic schema at load time.
    Properties return typed Pydantic model instances with attribute access.
    """

    def __init__(self) -> None:
        self._application = _load_validated(ApplicationSchema, "application.yaml")
        self._logging = _load_validated(LoggingSchema, "logging.yaml")

    @property
    def application(self) -> ApplicationSchema:
        """Application settings."""
        return self._application

    @property
    def logging(self) -> LoggingSchema:
        """Logging settings."""
        return self._logging


@lru_cache
def get_settings() -> Settings:
    """Get cached environment settings. Reads config/.env when present."""
    env_path = find_project_root() / "config" / ".env"
    return Settings(_env_file=str(env_path))


def _env_settings() -> Settings:
    try:
        return get_settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid APPCTL_* environment settings: {e}") from e


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()


def get_target(override: str | None = None) -> str:
    """
    Resolve the remote service target.

    Precedence: explicit override, APPCTL_TARGET, application.yaml.

    Raises:
        ConfigurationError: If no non-empty target is configured, or the
            APPCTL_* environment cannot be parsed.
    """
    target = override or _env_settings().target or get_app_config().application.target.url
    target = (target or "").strip()
    if not target:
        raise ConfigurationError("No target configured. Set APPCTL_TARGET or target.url.")
    return target


def get_request_timeout() -> float:
    """Request timeout in seconds, APPCTL_TIMEOUT taking precedence."""
    timeout = _env_settings().timeout
    if timeout is not None:
        return timeout
    return float(get_app_config().application.timeouts.request)
