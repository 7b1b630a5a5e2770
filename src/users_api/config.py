"""
Configuration management for the Users API
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database (connection is probed at startup, resolvers never touch it)
    database_url: str = "sqlite://"
    database_pool_size: int = 5
    database_max_overflow: int = 10
    sql_echo: bool = False

    # API Settings
    api_host: str = "0.0.0.0"
    # Plain PORT is honoured too, as most hosting platforms set it
    api_port: int = Field(
        default=4000,
        validation_alias=AliasChoices("USERS_API_API_PORT", "PORT"),
    )
    api_reload: bool = False
    cors_origins: list[str] = ["*"]
    graphiql: bool = True

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "USERS_API_"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = Settings()


def get_database_url() -> str:
    """Get the configured database URL."""
    return settings.database_url
