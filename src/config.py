"""Configuration management for the application."""

from datetime import timedelta
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JWT_SECRET = "change-me-in-production"  # noqa: S105
MIGRATIONS_DIR = Path(__file__).resolve().parent / "migrations"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_path: str = Field(default="./data/conduit.db")
    migrations_dir: Path = Field(default=MIGRATIONS_DIR)
    debug_sql: bool = Field(default=False)

    # JWT
    jwt_secret: str = Field(default=DEFAULT_JWT_SECRET)
    jwt_algorithm: str = Field(default="HS256")
    jwt_expiry_hours: int = Field(default=72, gt=0)
    jwt_issuer: str = Field(default="conduit-api")

    # Password hashing
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)

    # API
    environment: str = Field(default="development")
    cors_origins: str = Field(default="http://localhost:3000")
    log_level: str = Field(default="INFO")

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production has secure settings."""
        if self.is_production and self.jwt_secret in ("", DEFAULT_JWT_SECRET):
            raise ValueError("JWT_SECRET must be changed in production")
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def database_url(self) -> str:
        """SQLAlchemy URL for the SQLite database file."""
        return f"sqlite:///{self.database_path}"

    @property
    def cors_origin_list(self) -> list[str]:
        """CORS origins split from the comma separated setting."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def token_ttl(self) -> timedelta:
        return timedelta(hours=self.jwt_expiry_hours)
