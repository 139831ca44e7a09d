"""Pydantic configuration models with validation."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import (
    AliasChoices,
    AliasPath,
    BaseModel,
    Field,
    field_validator,
    model_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

from kwikresolve.infrastructure.kwik.constants import (
    DEFAULT_ORIGIN,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
)

Environment = Literal["dev", "test", "prod"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LogFormat = Literal["json", "console"]


class AppConfig(BaseModel):
    """
    Canonical application configuration (validated, final).

    Note:
    - YAML is expected to be sectioned (http/kwik/logging).
    - Environment variables are handled by EnvOverrides(BaseSettings) so that
      load.py controls precedence (defaults < YAML < ENV < CLI).
    """

    # General
    app_name: str = Field(default="kwikresolve", description="Application name.")
    environment: Environment = Field(
        default="dev",
        description="Runtime environment (affects defaults like log format).",
    )

    # Outbound HTTP (YAML section: http.*)
    http_timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        validation_alias=AliasChoices(
            "http_timeout_seconds",
            AliasPath("http", "timeout_seconds"),
        ),
        description="Timeout applied to each outbound request (seconds).",
    )
    http_user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        validation_alias=AliasChoices(
            "http_user_agent",
            AliasPath("http", "user_agent"),
        ),
        description="Browser User-Agent sent to the hoster.",
    )

    # Hoster (YAML section: kwik.*)
    kwik_origin: str = Field(
        default=DEFAULT_ORIGIN,
        validation_alias=AliasChoices(
            "kwik_origin",
            AliasPath("kwik", "origin"),
        ),
        description="Origin used for the Referer/Origin request headers.",
    )

    # Logging (YAML section: logging.*)
    log_level: LogLevel = Field(
        default="INFO",
        validation_alias=AliasChoices(
            "log_level",
            AliasPath("logging", "level"),
        ),
        description="Log level.",
    )
    log_format: Optional[LogFormat] = Field(
        default=None,
        validation_alias=AliasChoices(
            "log_format",
            AliasPath("logging", "format"),
        ),
        description=(
            "Log renderer format (console/json). If unset, derived from environment."
        ),
    )

    @field_validator("http_timeout_seconds")
    @classmethod
    def _validate_http_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("http_timeout_seconds must be > 0")
        return v

    @field_validator("kwik_origin")
    @classmethod
    def _validate_origin(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("kwik_origin must be an http(s) origin")
        return v.rstrip("/")

    @model_validator(mode="after")
    def _derive_defaults(self) -> "AppConfig":
        # Default log format: console in dev/test, json in prod.
        if self.log_format is None:
            self.log_format = "json" if self.environment == "prod" else "console"
        return self

    def to_sectioned_dict(self) -> dict[str, Any]:
        """Dump configuration in the sectioned shape used by config.yaml."""
        return {
            "app_name": self.app_name,
            "environment": self.environment,
            "http": {
                "timeout_seconds": self.http_timeout_seconds,
                "user_agent": self.http_user_agent,
            },
            "kwik": {"origin": self.kwik_origin},
            "logging": {"level": self.log_level, "format": self.log_format},
        }


class EnvOverrides(BaseSettings):
    """
    Environment-variable overrides (all optional).

    load.py reads KWIKRESOLVE_* variables through this model, keeps only the
    ones that were set and merges them over YAML/defaults before validating
    AppConfig.

    Supported env vars:
    - KWIKRESOLVE_ENVIRONMENT
    - KWIKRESOLVE_HTTP_TIMEOUT_SECONDS
    - KWIKRESOLVE_HTTP_USER_AGENT
    - KWIKRESOLVE_KWIK_ORIGIN
    - KWIKRESOLVE_LOG_LEVEL / KWIKRESOLVE_LOG_FORMAT
    """

    model_config = SettingsConfigDict(
        env_prefix="KWIKRESOLVE_",
        extra="ignore",
        case_sensitive=False,
    )

    app_name: Optional[str] = None
    environment: Optional[Environment] = None

    http_timeout_seconds: Optional[float] = None
    http_user_agent: Optional[str] = None

    kwik_origin: Optional[str] = None

    log_level: Optional[LogLevel] = None
    log_format: Optional[LogFormat] = None

    def to_update_dict(self) -> dict[str, Any]:
        """Return only values that were actually provided (non-None)."""
        return self.model_dump(exclude_none=True)
