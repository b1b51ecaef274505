"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Database
    DATABASE_URL: str = "sqlite:///./company_manager.db"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # Auth
    SECRET_KEY: str = ""
    REFRESH_TOKEN_SECRET_KEY: str = ""
    JWT_ISSUER: str = "company-manager"
    JWT_AUDIENCE: str = "company-manager-clients"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    REFRESH_TOKEN_EXPIRE_DAYS: int = 7
    JWT_CLOCK_SKEW_SECONDS: int = 60
    PASSWORD_PEPPER: str = ""

    # Lockout
    MAX_FAILED_LOGIN_ATTEMPTS: int = 5
    LOCKOUT_MINUTES: int = 15

    # Admin setup (for first-time initialization)
    ADMIN_EMAIL: str = "admin@company.com"
    ADMIN_PASSWORD: str = "Admin@123"  # noqa: S105

    @field_validator("SECRET_KEY", "REFRESH_TOKEN_SECRET_KEY", "PASSWORD_PEPPER", mode="after")
    @classmethod
    def strip_secret(cls, value: str) -> str:
        """Strip whitespace from secrets."""
        return value.strip()

    @field_validator("ADMIN_EMAIL", "ADMIN_PASSWORD", mode="after")
    @classmethod
    def strip_admin_credentials(cls, value: str) -> str:
        """Strip whitespace from admin credentials."""
        return value.strip()

    @model_validator(mode="after")
    def validate_production_secrets(self) -> "Settings":
        """Refuse to run in production without a signing key."""
        if self.ENVIRONMENT == "production" and not self.SECRET_KEY:
            msg = "SECRET_KEY is required when ENVIRONMENT is 'production'"
            raise ValueError(msg)
        if self.MAX_FAILED_LOGIN_ATTEMPTS < 1:
            msg = "MAX_FAILED_LOGIN_ATTEMPTS must be at least 1"
            raise ValueError(msg)
        return self


def configure_logging(environment: str = "development") -> None:
    """Configure structured logging with structlog."""
    use_json = environment == "production"

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if environment == "development" else logging.INFO,
    )

    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
