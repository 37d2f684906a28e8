"""
Application configuration with Pydantic Settings for validation and type safety.
Values come from environment variables or a .env file, with local/dev fallbacks.
"""

from enum import Enum
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Environment(str, Enum):
    """Application environment types"""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Application settings with validation.
    Settings are loaded from environment variables or .env file.
    """

    # Application settings
    app_name: str = Field(default="ElaineDiet", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=3000, ge=1, le=65535, description="Server port")

    # Database settings - PostgreSQL
    database_url: str = Field(
        default="postgresql+psycopg2://postgres@localhost:5432/elainediet",
        description="Relational store connection URL",
    )
    db_sslmode: Optional[str] = Field(
        default=None, description="libpq sslmode (e.g. 'require') for PostgreSQL"
    )
    db_echo: bool = Field(default=False, description="SQLAlchemy echo SQL statements")
    db_pool_size: int = Field(default=5, ge=1, description="Connection pool size")
    db_init_attempts: int = Field(
        default=5, ge=1, description="Database initialization retry attempts"
    )
    db_init_delay_sec: float = Field(
        default=2.0, ge=0, description="Delay between DB init attempts"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    # CORS settings
    cors_origins: list[str] = Field(
        default=["https://elainediet.zeabur.app"],
        description="Explicitly allowed CORS origins",
    )
    cors_origin_regex: Optional[str] = Field(
        default=r"http://localhost(:\d+)?|https://.*\.zeabur\.app",
        description="Pattern for additionally allowed origins (localhost, hosting subdomains)",
    )
    cors_allow_credentials: bool = Field(
        default=False, description="Allow CORS credentials"
    )
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "OPTIONS"], description="Allowed HTTP methods"
    )
    cors_allow_headers: list[str] = Field(
        default=["Content-Type"], description="Allowed HTTP headers"
    )

    # API settings
    api_title: str = Field(
        default="ElaineDiet API", description="API documentation title"
    )
    api_description: str = Field(
        default="Meal composition records and daily nutrition sums",
        description="API documentation description",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment value"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    @field_validator("database_url", mode="after")
    @classmethod
    def normalize_database_url(cls, v: str) -> str:
        """Hosting providers hand out postgres:// URLs; pin them to psycopg2"""
        for prefix in ("postgres://", "postgresql://"):
            if v.startswith(prefix):
                return "postgresql+psycopg2://" + v[len(prefix):]
        return v

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT

    def is_testing(self) -> bool:
        """Check if running in testing environment"""
        return self.environment == Environment.TESTING

    def is_postgres(self) -> bool:
        return self.database_url.startswith("postgresql")


# Global settings instance
settings = Settings()
