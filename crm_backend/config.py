"""CRM Backend — Configuration via pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./dev.db"

    # Security (SECRET_KEY is mandatory, startup fails without it)
    SECRET_KEY: str = Field(min_length=16)
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRATION_HOURS: int = 24
    BCRYPT_ROUNDS: int = Field(default=10, ge=4, le=31)

    # Reject tokens whose session row is no longer active
    ENFORCE_SINGLE_SESSION: bool = False

    # Bootstrap admin (created on startup when both are set)
    ADMIN_EMAIL: str = ""
    ADMIN_PASSWORD: str = ""
    ADMIN_DISPLAY_NAME: str = "Administrator"

    CORS_ORIGINS: list[str] = ["http://localhost:3000", "http://localhost:8080"]

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
