# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# Loads configuration from environment variables using pydantic-settings.
# Settings are frozen once loaded and handed explicitly to create_app() and
# to the server bootstrap.
#
# Usage:
#   from app.config import get_settings
#   settings = get_settings()
#   print(settings.cors_origins_list)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
# =============================================================================

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CORS_ORIGIN = "http://localhost:5173"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Empty variables are ignored, so `PORT=` behaves like an unset PORT.
    """

    # -------------------------------------------------------------------------
    # Server
    # -------------------------------------------------------------------------

    HOST: str = Field(
        default="0.0.0.0",
        description="Interface to bind the API server to"
    )

    PORT: int = Field(
        default=4000,
        ge=1,
        le=65535,
        description="TCP port for the API server"
    )

    ENVIRONMENT: str = Field(
        default="development",
        validation_alias=AliasChoices("ENVIRONMENT", "NODE_ENV"),
        description="Environment label (reported only)"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable DEBUG-level logging"
    )

    # -------------------------------------------------------------------------
    # CORS
    # -------------------------------------------------------------------------

    CORS_ORIGIN: str = Field(
        default=DEFAULT_CORS_ORIGIN,
        description="Allowed CORS origins (comma-separated)"
    )

    CORS_PREVIEW_SUFFIX: str = Field(
        default=".vercel.app",
        description="Origin suffix that is always allowed (preview deployments)"
    )

    # -------------------------------------------------------------------------
    # Request limits
    # -------------------------------------------------------------------------

    MAX_BODY_SIZE_MB: int = Field(
        default=5,
        ge=1,
        le=100,
        description="Maximum request body size in MB"
    )

    # -------------------------------------------------------------------------
    # Database (Supabase)
    # -------------------------------------------------------------------------
    # Required - the server refuses to start without a reachable database

    SUPABASE_URL: str = Field(
        ...,
        description="Supabase project URL (e.g., https://xxx.supabase.co)"
    )

    SUPABASE_SERVICE_KEY: str = Field(
        ...,
        description="Supabase service_role key (bypasses RLS)"
    )

    SUPABASE_JWT_SECRET: str = Field(
        ...,
        description="Secret used to verify Supabase access tokens (HS256)"
    )

    DATABASE_NAME: str = Field(
        default="employee_assessment",
        description="Database label reported at startup"
    )

    DATABASE_PROBE_TABLE: str = Field(
        default="employees",
        description="Table queried at startup to verify connectivity"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
        frozen=True,
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGIN into a list of origins.

        Example: "http://localhost:5173, https://hr.example.com"
            -> ["http://localhost:5173", "https://hr.example.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGIN.split(",") if origin.strip()]

    @property
    def cors_description(self) -> str:
        """Allowed origins as reported in the startup banner."""
        return ", ".join(self.cors_origins_list)

    @property
    def max_body_size_bytes(self) -> int:
        return self.MAX_BODY_SIZE_MB * 1024 * 1024

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    The .env file is parsed and validated once per process.
    """
    return Settings()
