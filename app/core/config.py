"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here; no scattered magic strings.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        env: Deployment environment name (dev, stg, prod).
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        host: Interface the development server binds to.
        port: Port the development server listens on.
        request_timeout_seconds: Requests running longer get a 408.
        cors_origins: Origins allowed by the CORS middleware.
        rate_limit_enabled: Turn rate limiting on or off.
        rate_limit_default: Default rate limit for all endpoints.
        max_request_size_bytes: Maximum allowed request body size.
        auto_create_schema: Create missing tables on startup.

    The database DSN is either given whole (``DATABASE_URL``) or built
    from the postgres_* values.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Yahime API"
    version: str = "0.1.0"
    env: str = "dev"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8080
    request_timeout_seconds: float = 5.0
    cors_origins: list[str] = ["*"]
    rate_limit_enabled: bool = True
    rate_limit_default: str = "120/minute"
    max_request_size_bytes: int = 1_048_576  # 1 MB
    auto_create_schema: bool = True

    database_url: Optional[str] = None
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "yahime"

    def get_database_dsn(self) -> str:
        """Return the effective database DSN.

        Priority:
        1. Explicit `DATABASE_URL`
        2. Build DSN from postgres_* values (useful for Docker Compose or local setups)
        """
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg2://{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


settings = Settings()
