"""
Configuration Management.

Loads settings from YAML and overrides from the environment. Nothing
backend-specific is hardcoded in handler code.

Settings (YAML):
    application.yaml   - App identity, backend base URL, request timeout
    logging.yaml       - Logging configuration

Lookup, per file:
    <project root>/config/settings/<file>   - checkout override, if present
    productdesk/settings/<file>             - defaults shipped with the package

The project root is the nearest directory holding a .project_root marker.
An installed package without a checkout runs on the shipped defaults.

Environment overrides (PRODUCTDESK_ prefix):
    PRODUCTDESK_API_BASE_URL, PRODUCTDESK_REQUEST_TIMEOUT
"""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from productdesk.core.config_schema import ApplicationSchema, LoggingSchema
from productdesk.core.exceptions import ConfigurationError

_PACKAGE_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_SETTINGS_DIR = Path(__file__).resolve().parents[1] / "settings"


def find_project_root() -> Path:
    """
    Find project root by looking for the .project_root marker file.

    Searches upward from the working directory first, then from the
    package location so an editable install works from any directory.
    """
    for start in (Path.cwd(), _PACKAGE_ROOT):
        current = start
        while current != current.parent:
            if (current / ".project_root").exists():
                return current
            current = current.parent
    raise RuntimeError("Project root not found. Ensure .project_root file exists.")


def settings_path(filename: str) -> Path:
    """Path of a settings file: the checkout override if any, else the shipped default."""
    try:
        override = find_project_root() / "config" / "settings" / filename
    except RuntimeError:
        override = None
    if override is not None and override.exists():
        return override
    return DEFAULT_SETTINGS_DIR / filename


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Load a YAML configuration file (see settings_path for the lookup)."""
    config_path = settings_path(filename)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


class Settings(BaseSettings):
    """Environment overrides for values normally read from application.yaml."""

    api_base_url: str | None = None
    request_timeout: float | None = None

    model_config = SettingsConfigDict(
        env_prefix="PRODUCTDESK_",
        case_sensitive=False,
        extra="ignore",
    )


def _load_validated(schema_cls: type, filename: str) -> Any:
    """Load YAML and validate against schema. Returns typed model instance."""
    raw = load_yaml_config(filename)
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ConfigurationError(
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
    """Get cached environment overrides."""
    return Settings()


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()


def get_api_settings() -> tuple[str, float | None, str]:
    """
    Resolve the effective backend connection settings.

    Environment overrides win over application.yaml.

    Returns:
        Tuple of (base_url, timeout_seconds, user_email_header).
    """
    app = get_app_config().application
    overrides = get_settings()
    base_url = overrides.api_base_url or app.api.base_url
    timeout = (
        overrides.request_timeout
        if overrides.request_timeout is not None
        else app.timeouts.request
    )
    return base_url.rstrip("/"), timeout, app.api.user_email_header
