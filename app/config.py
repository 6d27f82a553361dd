"""Application configuration

Settings are read from ``HELLODEMO_*`` environment variables and validated
with pydantic. Parsed settings are cached; call ``reset_settings()`` (or
``get_settings(reload=True)``) after changing the environment.
"""

import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from app.exceptions import ConfigurationError

# Project-specific prefix
_ENV_PREFIX = "HELLODEMO"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8080

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ServerSettings(BaseModel):
    """Listen address for the web server."""

    host: str = Field(default=DEFAULT_HOST, min_length=1)
    port: int = Field(default=DEFAULT_PORT, ge=0, le=65535)

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"


class LogSettings(BaseModel):
    """Logging output options."""

    level: str = "INFO"
    file: Optional[str] = None
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if value not in _LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(_LOG_LEVELS)}")
        return value

    @property
    def level_number(self) -> int:
        return getattr(logging, self.level)


class Settings(BaseModel):
    server: ServerSettings = Field(default_factory=ServerSettings)
    log: LogSettings = Field(default_factory=LogSettings)


_settings: Optional[Settings] = None


def _env(environ: Mapping[str, str], name: str) -> Optional[str]:
    value = environ.get(f"{_ENV_PREFIX}_{name}")
    if value is None or value == "":
        return None
    return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from an environment mapping (defaults to ``os.environ``).

    Raises:
        ConfigurationError: If any variable fails validation
    """
    if environ is None:
        environ = os.environ

    server_values = {}
    host = _env(environ, "HOST")
    if host is not None:
        server_values["host"] = host
    port = _env(environ, "PORT")
    if port is not None:
        server_values["port"] = port

    log_values = {}
    level = _env(environ, "LOG_LEVEL")
    if level is not None:
        log_values["level"] = level
    log_file = _env(environ, "LOG_FILE")
    if log_file is not None:
        log_values["file"] = log_file
    log_json = _env(environ, "LOG_JSON")
    if log_json is not None:
        log_values["json_format"] = log_json

    try:
        return Settings(
            server=ServerSettings(**server_values),
            log=LogSettings(**log_values),
        )
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid {_ENV_PREFIX}_* environment configuration: {e.error_count()} error(s)",
            details={
                "errors": [
                    {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
                    for err in e.errors()
                ]
            },
        ) from e


def get_settings(reload: bool = False) -> Settings:
    """Get cached settings, loading them from the environment on first use."""
    global _settings
    if _settings is None or reload:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Forget cached settings so the next ``get_settings()`` re-reads the environment."""
    global _settings
    _settings = None


__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "Settings",
    "ServerSettings",
    "LogSettings",
    "load_settings",
    "get_settings",
    "reset_settings",
]
