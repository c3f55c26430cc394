"""Application settings and environment configuration loading."""

from __future__ import annotations

from pathlib import Path
from typing import Self

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

PROJECT_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
PG_SSL_MODES = frozenset(
    {
        "disable",
        "allow",
        "prefer",
        "require",
        "verify-ca",
        "verify-full",
    },
)
LOG_FORMATS = frozenset({"text", "json"})


def _normalize_database_url(database_url: str) -> str:
    if "://" not in database_url:
        return database_url
    scheme, rest = database_url.split("://", 1)
    if scheme in {"postgres", "postgresql"}:
        return f"postgresql+psycopg://{rest}"
    return database_url


class Settings(BaseSettings):
    """Typed runtime configuration sourced from environment variables."""

    model_config = SettingsConfigDict(
        # Load the project `.env` regardless of current working directory.
        env_file=[DEFAULT_ENV_FILE, ".env"],
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: str = "dev"

    # Full URL wins over the discrete PG* variables when set.
    database_url: str = ""
    pghost: str = "localhost"
    pgport: int = Field(default=5432, ge=1, le=65535)
    pgdatabase: str = "postgres"
    pguser: str = "postgres"
    pgpassword: str = ""
    pgsslmode: str = "require"

    # Connection pool / query limits
    db_pool_size: int = Field(default=5, ge=1)
    db_pool_timeout_seconds: float = Field(default=30.0, gt=0)
    db_query_timeout_seconds: float = Field(default=10.0, gt=0)

    # Comma-separated origin allow-list; "*" allows any origin, "" disables CORS.
    cors_origins: str = "*"

    host: str = "0.0.0.0"  # noqa: S104
    port: int = Field(default=3000, ge=1, le=65535)

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"
    log_use_utc: bool = False
    request_log_slow_ms: int = Field(default=1000, ge=0)
    request_log_include_health: bool = False

    @model_validator(mode="after")
    def _validate(self) -> Self:
        self.pgsslmode = self.pgsslmode.strip().lower()
        if self.pgsslmode not in PG_SSL_MODES:
            raise ValueError(
                f"PGSSLMODE must be one of: {', '.join(sorted(PG_SSL_MODES))}.",
            )
        self.log_format = self.log_format.strip().lower()
        if self.log_format not in LOG_FORMATS:
            raise ValueError("LOG_FORMAT must be 'text' or 'json'.")
        return self

    @property
    def sqlalchemy_url(self) -> str | URL:
        """Async SQLAlchemy URL for the task database."""
        if self.database_url.strip():
            return _normalize_database_url(self.database_url.strip())
        return URL.create(
            "postgresql+psycopg",
            username=self.pguser or None,
            password=self.pgpassword or None,
            host=self.pghost,
            port=self.pgport,
            database=self.pgdatabase,
            query={"sslmode": self.pgsslmode},
        )


settings = Settings()
