# -*- coding: utf-8 -*-
"""Configuration loaded from environment via Pydantic Settings.

Nested env vars use <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, HTTP__TIMEOUT_SECONDS.
Build metadata is read from the variables Concourse exports to every step
(BUILD_ID, BUILD_TEAM_NAME, ATC_EXTERNAL_URL, ...).
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """General application configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    app_name: str = "hipchat-notification-resource"
    service_name: Optional[str] = None
    service_version: Optional[str] = None
    environment: Literal["development", "test", "production"] = "production"


class LoggingSettings(BaseSettings):
    """Structured logging configuration for structlog/stdlib/Logfire."""

    model_config = SettingsConfigDict(extra="ignore")

    # Per-target levels (only the 5 standard levels)
    console_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    logfire_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Console output goes to stderr; stdout is reserved for the resource response.
    log_to_console: bool = True
    log_to_file: bool = False
    log_file_path: str = "logs/hipchat_resource.log"

    # Main output format: JSONRenderer if True, ConsoleRenderer if False
    json_format: bool = False

    # Logfire integration via structlog
    logfire_enabled: bool = False
    logfire_token: Optional[str] = None


class HttpSettings(BaseSettings):
    """Outbound HTTP configuration for the HipChat API."""

    model_config = SettingsConfigDict(extra="ignore")

    timeout_seconds: float = Field(
        default=30.0,
        ge=1.0,
        le=300.0,
        description="Total request timeout in seconds.",
    )


class BuildContext(BaseSettings):
    """Build-identifying values exported by Concourse for the running step.

    Read once per invocation and never mutated. Every value is optional;
    an unset value substitutes as an empty string.
    """

    model_config = SettingsConfigDict(extra="ignore", frozen=True)

    build_id: Optional[str] = None
    build_name: Optional[str] = None
    build_team_id: Optional[str] = None
    build_team_name: Optional[str] = None
    build_job_id: Optional[str] = None
    build_job_name: Optional[str] = None
    build_pipeline_id: Optional[str] = None
    build_pipeline_name: Optional[str] = None
    atc_external_url: Optional[str] = None

    def tokens(self) -> dict[str, Optional[str]]:
        """Return the build values keyed by their token name (e.g. BUILD_ID)."""
        return {name.upper(): value for name, value in self.model_dump().items()}


class Settings(BaseSettings):
    """Root application configuration.

    Groups all sub-configurations so the rest of the code does not
    read environment variables directly. Nested overrides use
    <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, HTTP__TIMEOUT_SECONDS.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        extra="ignore",
        frozen=True,
    )

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    http: HttpSettings = Field(default_factory=HttpSettings)

    @classmethod
    def from_env(cls, **overrides: Any) -> Settings:
        """Build settings from environment, with optional overrides.

        Nested overrides can be passed as flat keys or nested dicts, e.g.:
        - from_env(http__timeout_seconds=10)
        - from_env(http={"timeout_seconds": 10})
        """
        return cls(**overrides)


@lru_cache
def get_settings() -> Settings:
    """Return a single cached instance of Settings."""
    return Settings()


@lru_cache
def get_build_context() -> BuildContext:
    """Return the build context snapshot for this invocation."""
    return BuildContext()
