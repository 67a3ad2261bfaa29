"""Configuration settings for the file server."""

import os
from dataclasses import dataclass, field
from typing import Tuple


DATABASE_PATH = os.environ.get("FILESERVER_DATABASE_PATH", "/app/data/fileserver.db")

SERVER_HOST = os.environ.get("FILESERVER_HOST", "0.0.0.0")

SERVER_PORT = int(os.environ.get("FILESERVER_PORT", "8080"))

DEFAULT_JWT_SECRET = "development-only-secret-change-me-before-deploying"

JWT_SECRET = os.environ.get("FILESERVER_JWT_SECRET", DEFAULT_JWT_SECRET)

JWT_EXPIRATION_SECONDS = int(os.environ.get("FILESERVER_JWT_EXPIRATION", "3600"))

CORS_ALLOWED_ORIGINS = tuple(
    origin.strip()
    for origin in os.environ.get("FILESERVER_CORS_ORIGINS", "http://localhost:8081").split(",")
    if origin.strip()
)


@dataclass(frozen=True)
class TokenSettings:
    """
    Signing configuration for session tokens.

    Loaded once at startup and handed to the token service by reference.
    """
    secret: str = field(repr=False)
    expiration_seconds: int


@dataclass(frozen=True)
class Settings:
    database_path: str
    token: TokenSettings
    cors_origins: Tuple[str, ...] = ()

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            database_path=DATABASE_PATH,
            token=TokenSettings(secret=JWT_SECRET, expiration_seconds=JWT_EXPIRATION_SECONDS),
            cors_origins=CORS_ALLOWED_ORIGINS,
        )
