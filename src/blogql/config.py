"""
Configuration management for blogql
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    # Also read from the bare MONGO_URL used by older deployments
    mongo_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("blogql_mongo_url", "mongo_url"),
    )
    mongo_database: str = "P5DB"
    mongo_timeout_ms: int = 5000

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 4000
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]
    graphiql: bool = True

    # Credentials (Argon2id cost parameters; memory cost in KiB)
    password_hash_time_cost: int = 3
    password_hash_memory_cost: int = 65536
    password_hash_parallelism: int = 4

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="BLOGQL_",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()


class MissingConfigurationError(RuntimeError):
    """Raised when a setting required at startup is absent."""


def require_mongo_url(current: Settings | None = None) -> str:
    """Return the configured MongoDB URL or fail startup.

    Raises:
        MissingConfigurationError: If neither BLOGQL_MONGO_URL nor MONGO_URL is set
    """
    current = current or settings
    if not current.mongo_url:
        raise MissingConfigurationError(
            "Please provide a MongoDB connection string via BLOGQL_MONGO_URL (or MONGO_URL)"
        )
    return current.mongo_url
