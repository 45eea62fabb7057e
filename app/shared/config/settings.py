# 📄 File: app/shared/config/settings.py
#
# 🧭 Purpose (Layman Explanation):
# The main configuration center that reads all settings from environment variables
# and hands them to the rest of the care app in an organized way.
#
# 🧪 Purpose (Technical Summary):
# Pydantic-based settings management with environment variable loading,
# validation, and type safety for all application configuration parameters.
#
# 🔗 Dependencies:
# - pydantic-settings for configuration management
# - python-dotenv for .env file loading
#
# 🔄 Connected Modules / Calls From:
# - app.main (application startup)
# - Database connection and Supabase client modules
# - Domain services that read tunables (device sync delay, page size, defaults)

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Settings are loaded from the process environment with fallback to a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================

    APP_NAME: str = Field(default="Care Circle API", description="Application name")
    APP_VERSION: str = Field(default="1.0.0", description="Application version")
    APP_DESCRIPTION: str = Field(
        default="Care recipients, caregivers, reminders and devices for family caregivers",
        description="Application description"
    )
    ENVIRONMENT: str = Field(default="development", description="Runtime environment")
    DEBUG: bool = Field(default=True, description="Debug mode flag")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(default="json", description="Log format (json or text)")
    LOG_FILE: Optional[str] = Field(None, description="Optional log file path")

    # =========================================================================
    # SERVER CONFIGURATION
    # =========================================================================

    HOST: str = Field(default="0.0.0.0", description="Server host")
    PORT: int = Field(default=8000, description="Server port")
    RELOAD: bool = Field(default=True, description="Auto-reload on changes")
    WORKERS: int = Field(default=1, description="Number of worker processes")

    # =========================================================================
    # DATABASE CONFIGURATION
    # =========================================================================

    # Direct connection to the Supabase PostgreSQL instance
    DATABASE_URL: Optional[str] = Field(None, description="PostgreSQL connection URL")
    DB_HOST: str = Field(default="localhost", description="Database host")
    DB_PORT: int = Field(default=5432, description="Database port")
    DB_NAME: str = Field(default="postgres", description="Database name")
    DB_USER: str = Field(default="postgres", description="Database user")
    DB_PASSWORD: str = Field(default="", description="Database password")

    DB_POOL_SIZE: int = Field(default=10, description="Database pool size")
    DB_MAX_OVERFLOW: int = Field(default=20, description="Database pool overflow")
    DB_POOL_TIMEOUT: int = Field(default=30, description="Database pool timeout")
    DB_POOL_RECYCLE: int = Field(default=3600, description="Database pool recycle time")

    # =========================================================================
    # SUPABASE SERVICES
    # =========================================================================

    SUPABASE_URL: str = Field(..., description="Supabase project URL")
    SUPABASE_ANON_KEY: str = Field(..., description="Supabase anonymous key")
    SUPABASE_JWT_SECRET: Optional[str] = Field(
        None,
        description="JWT secret for verifying access tokens locally"
    )
    SUPABASE_JWT_AUDIENCE: str = Field(
        default="authenticated",
        description="Expected audience claim of Supabase access tokens"
    )
    SITE_URL: str = Field(
        default="http://localhost:3000",
        description="Public site URL used for auth redirects"
    )

    # =========================================================================
    # AUTH COOKIE & CORS
    # =========================================================================

    AUTH_COOKIE_NAME: str = Field(default="access_token", description="Session cookie name")
    AUTH_COOKIE_SECURE: bool = Field(default=False, description="Send cookie over HTTPS only")
    AUTH_COOKIE_MAX_AGE: int = Field(default=3600, description="Session cookie lifetime (seconds)")
    AUTH_VERIFIER_COOKIE_NAME: str = Field(
        default="auth_code_verifier",
        description="Cookie carrying the PKCE verifier of an OAuth sign-in in progress"
    )
    AUTH_VERIFIER_COOKIE_MAX_AGE: int = Field(
        default=600,
        description="Lifetime of the PKCE verifier cookie (seconds)"
    )
    PASSWORD_MIN_LENGTH: int = Field(default=6, description="Minimum length of a new password")

    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="CORS allowed origins"
    )
    CORS_ALLOW_CREDENTIALS: bool = Field(default=True, description="CORS allow credentials")

    # =========================================================================
    # CARE DOMAIN
    # =========================================================================

    DEVICE_SYNC_DELAY_SECONDS: float = Field(
        default=2.5,
        description="Simulated time for a device sync to complete"
    )
    REMINDERS_PAGE_SIZE: int = Field(default=10, description="Reminders per page")
    DEFAULT_USER_TIMEZONE: str = Field(
        default="America/New_York",
        description="Timezone given to newly provisioned users"
    )
    DEFAULT_USER_PHONE: str = Field(
        default="+1",
        description="Phone placeholder given to newly provisioned users"
    )
    CALENDAR_PALETTE: List[str] = Field(
        default=["#87CEEB", "#FFB6C1", "#D8BFD8", "#FFDAB9", "#98FB98"],
        description="Per-recipient calendar colours"
    )
    CONVERSATION_LOG_LIMIT: int = Field(
        default=10,
        description="Conversation log entries returned per channel"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed_environments = ["development", "staging", "production", "test"]
        if v.lower() not in allowed_environments:
            raise ValueError(f"Environment must be one of {allowed_environments}")
        return v.lower()

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level value."""
        allowed_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed_levels:
            raise ValueError(f"Log level must be one of {allowed_levels}")
        return v.upper()

    @field_validator("CORS_ORIGINS")
    @classmethod
    def validate_cors_origins(cls, v: str) -> str:
        """Validate CORS origins format."""
        origins = [origin.strip() for origin in v.split(",")]
        for origin in origins:
            if not origin.startswith(("http://", "https://", "*")):
                raise ValueError(f"Invalid CORS origin format: {origin}")
        return v

    @field_validator("CALENDAR_PALETTE")
    @classmethod
    def validate_palette(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("Calendar palette needs at least one colour")
        return v

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================

    @property
    def database_url(self) -> str:
        """Get the database URL, preferring explicit DATABASE_URL."""
        if self.DATABASE_URL:
            return self.DATABASE_URL

        return (
            f"postgresql+asyncpg://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    @property
    def cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    @property
    def auth_redirect_url(self) -> str:
        return f"{self.SITE_URL.rstrip('/')}/auth/callback"

    @property
    def password_reset_redirect_url(self) -> str:
        return f"{self.SITE_URL.rstrip('/')}/auth/reset-password"

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    @property
    def is_testing(self) -> bool:
        return self.ENVIRONMENT == "test"


# ============================================================================
# SETTINGS FACTORY
# ============================================================================

@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Uses lru_cache so settings are loaded only once
    and reused throughout the application lifecycle.
    """
    return Settings()
