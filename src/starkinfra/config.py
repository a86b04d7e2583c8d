"""Configuration management for the Stark Infra SDK."""

from __future__ import annotations

import logging
import os
import platform
from functools import lru_cache
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from starkinfra.utils.http import normalize_host

SDK_VERSION = "0.1.0"

_config_logger = logging.getLogger(__name__)


def _default_user_agent() -> str:
    return f"Python-{platform.python_version()}-SDK-Infra-{SDK_VERSION}"


class LoggingSettings(BaseModel):
    level: str = Field(default="INFO", description="Python logging level name")
    file: str | None = Field(default=None, description="Optional log file path")


class ApiSettings(BaseModel):
    version: str = Field(default="v2")
    production_host: str = Field(default="https://api.starkinfra.com/")
    sandbox_host: str = Field(default="https://sandbox.api.starkinfra.com/")

    @field_validator("production_host", "sandbox_host")
    @classmethod
    def _validate_host(cls, value: str) -> str:
        return normalize_host(value)

    @field_validator("version")
    @classmethod
    def _validate_version(cls, value: str) -> str:
        stripped = value.strip().strip("/")
        if not stripped:
            raise ValueError("api version must not be empty")
        return stripped


class HttpSettings(BaseModel):
    timeout_seconds: float = Field(default=15.0, ge=0.1, le=300)
    user_agent: str = Field(default_factory=_default_user_agent)


class DefaultsSettings(BaseModel):
    language: Literal["en-US", "pt-BR"] = Field(default="en-US")


class Settings(BaseModel):
    api: ApiSettings = Field(default_factory=ApiSettings)
    http: HttpSettings = Field(default_factory=HttpSettings)
    defaults: DefaultsSettings = Field(default_factory=DefaultsSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    def host_for(self, environment: str) -> str:
        if environment == "production":
            return self.api.production_host
        return self.api.sandbox_host


ENV_KEYS = {
    "api_version": "STARKINFRA_API_VERSION",
    "production_host": "STARKINFRA_PRODUCTION_HOST",
    "sandbox_host": "STARKINFRA_SANDBOX_HOST",
    "timeout": "STARKINFRA_TIMEOUT",
    "user_agent": "STARKINFRA_USER_AGENT",
    "language": "STARKINFRA_LANGUAGE",
    "log_level": "LOG_LEVEL",
    "log_file": "LOG_FILE",
}


def _env_float(key: str, default: float) -> float:
    value = os.getenv(key)
    if value is None or value.strip() == "":
        return default
    try:
        return float(value)
    except ValueError:
        _config_logger.warning(
            "Invalid float value for %s: %r, using default %s", key, value, default
        )
        return default


def _env_str(key: str, default: str) -> str:
    value = os.getenv(key)
    if value is None or value.strip() == "":
        return default
    return value.strip()


def load_settings() -> Settings:
    """Load configuration and cache the result."""

    return _load_settings_cached()


@lru_cache(maxsize=1)
def _load_settings_cached() -> Settings:
    load_dotenv(dotenv_path=Path.cwd() / ".env")
    log_file_env = os.getenv(ENV_KEYS["log_file"])

    settings_data: dict[str, object] = {
        "api": {
            "version": _env_str(ENV_KEYS["api_version"], ApiSettings().version),
            "production_host": _env_str(
                ENV_KEYS["production_host"], ApiSettings().production_host
            ),
            "sandbox_host": _env_str(ENV_KEYS["sandbox_host"], ApiSettings().sandbox_host),
        },
        "http": {
            "timeout_seconds": _env_float(
                ENV_KEYS["timeout"],
                HttpSettings().timeout_seconds,
            ),
            "user_agent": _env_str(ENV_KEYS["user_agent"], _default_user_agent()),
        },
        "defaults": {
            "language": _env_str(ENV_KEYS["language"], DefaultsSettings().language),
        },
        "logging": {
            "level": _env_str(ENV_KEYS["log_level"], LoggingSettings().level),
            "file": log_file_env.strip() if log_file_env and log_file_env.strip() else None,
        },
    }

    try:
        return Settings.model_validate(settings_data)
    except ValidationError as exc:
        raise RuntimeError(f"Invalid configuration: {exc}") from exc
