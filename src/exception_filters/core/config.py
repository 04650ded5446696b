"""Runtime settings powered by ``pydantic-settings``."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .. import __version__ as package_version

REPOSITORY_ROOT = Path(__file__).resolve().parents[3]

EnvironmentName = Literal["development", "test", "ci"]
LogFormat = Literal["json", "plain"]

_ENVIRONMENT_ALIASES: dict[str, EnvironmentName] = {
    "development": "development",
    "dev": "development",
    "local": "development",
    "test": "test",
    "testing": "test",
    "ci": "ci",
}

_ENVIRONMENT_PROFILES: dict[EnvironmentName, dict[str, Any]] = {
    "development": {
        "log_level": "DEBUG",
        "log_format": "plain",
        "reload": True,
    },
    "test": {
        "log_level": "WARNING",
        "log_format": "json",
        "reload": False,
    },
    "ci": {
        "log_level": "INFO",
        "log_format": "json",
        "reload": False,
    },
}


class Settings(BaseSettings):
    """Configuration for services wired with the exception-filter chain."""

    model_config = SettingsConfigDict(
        env_prefix="EXCEPTION_FILTERS_",
        env_file=REPOSITORY_ROOT / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    project_name: str = "Exception Filters"
    environment: EnvironmentName = "development"
    version: str = package_version
    log_level: str = "INFO"
    log_format: LogFormat = "json"
    request_id_header: str = "X-Request-ID"
    app_host: str = "0.0.0.0"
    app_port: int = Field(default=8000, ge=1, le=65535)
    reload: bool = False

    @field_validator("environment", mode="before")
    @classmethod
    def _normalise_environment(cls, value: object) -> EnvironmentName:
        normalized = value.strip().lower() if isinstance(value, str) else ""
        return _ENVIRONMENT_ALIASES.get(normalized, "development")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value: object) -> str:
        if not isinstance(value, str) or not value.strip():
            return "INFO"
        return value.strip().upper()

    @field_validator("log_format", mode="before")
    @classmethod
    def _normalise_log_format(cls, value: object) -> str:
        if not isinstance(value, str):
            return "json"
        normalized = value.strip().lower()
        if normalized not in {"json", "plain"}:
            return "json"
        return normalized

    @field_validator("request_id_header", mode="before")
    @classmethod
    def _ensure_header_name(cls, value: object) -> str:
        if not isinstance(value, str) or not value.strip():
            return "X-Request-ID"
        return value.strip()

    @model_validator(mode="after")
    def _apply_environment_profile(self) -> "Settings":
        profile = _ENVIRONMENT_PROFILES[self.environment]
        fields_set = set(getattr(self, "model_fields_set", set()))
        for field_name, value in profile.items():
            if field_name not in fields_set:
                setattr(self, field_name, value)
        return self


@lru_cache()
def get_settings() -> Settings:
    """Return a cached ``Settings`` instance."""

    return Settings()
