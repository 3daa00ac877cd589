"""
Snippr - Application Configuration
====================================

What:  Process-level settings loaded with pydantic-settings.
How:   Values come from environment variables (or a .env file), are coerced
       and range-checked at import time, and are exposed through the
       `settings` singleton.

Environment variables:
    BACKEND_HOST   bind address used by `snippr` / run()   (default 0.0.0.0)
    BACKEND_PORT   listen port                             (default 8000)
    LOG_LEVEL      DEBUG, INFO, WARNING, ERROR, CRITICAL   (default INFO)
    CORS_ORIGINS   comma-separated allowed origins         (default http://localhost:3000)

The snippet store itself has no configuration: it always starts with the
eight seed snippets and lives in memory only.
"""

from pydantic_settings import BaseSettings
from pydantic import Field, field_validator
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000, ge=1024, le=65535)

    # ── Logging ───────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── CORS ──────────────────────────────────────────────────────────────
    cors_origins: str = Field(default="http://localhost:3000")

    @property
    def cors_origins_list(self) -> List[str]:
        """Comma-separated CORS_ORIGINS split into the list CORSMiddleware expects."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


settings = Settings()
