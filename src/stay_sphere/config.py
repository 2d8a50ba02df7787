"""Application configuration."""

import os
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

DEFAULT_CORS_ORIGINS = "http://localhost:5173,http://localhost:5174"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    access_token_secret: str
    db_name: str | None = None
    db_pass: str | None = None
    mongodb_host: str = "cluster0.cnltwph.mongodb.net"
    mongodb_uri: str | None = None
    database_name: str = "staySphereDB"
    port: int = 5000
    cors_origins: str = DEFAULT_CORS_ORIGINS
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        """Return true when running in the production deployment."""
        return self.environment == "production"


def build_mongodb_uri(settings: Settings) -> str:
    """Return the MongoDB connection string for the configured cluster."""
    if settings.mongodb_uri:
        return settings.mongodb_uri
    if not settings.db_name or not settings.db_pass:
        raise ValueError("DB_NAME and DB_PASS are required when MONGODB_URI is unset")
    user = quote_plus(settings.db_name)
    password = quote_plus(settings.db_pass)
    return (
        f"mongodb+srv://{user}:{password}@{settings.mongodb_host}/"
        "?retryWrites=true&w=majority&appName=Cluster0"
    )


def parse_cors_origins(raw: str | None) -> list[str]:
    """Parse the comma-separated CORS allow-list from env."""
    if raw is None:
        return []
    origins: list[str] = []
    for chunk in raw.split(","):
        value = chunk.strip().rstrip("/")
        if value and value not in origins:
            origins.append(value)
    return origins
