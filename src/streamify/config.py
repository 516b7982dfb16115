"""Configuration for the Streamify API.

All settings are read from environment variables (or a `.env` file in the
working directory). Names match the deployment environment, so `PORT`,
`NODE_ENV` and `FRONTEND_URL` keep their usual meaning.
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JWT_SECRET = "dev_secret_change_in_production"
DEFAULT_FRONTEND_URL = "http://localhost:5173"


class Settings(BaseSettings):
    """Streamify API settings."""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    NODE_ENV: Literal["development", "production"] = "development"
    LOG_LEVEL: Optional[str] = None

    # CORS
    FRONTEND_URL: Optional[str] = None

    # MongoDB
    MONGO_URI: SecretStr = SecretStr("mongodb://localhost:27017")
    MONGO_DB_NAME: str = "streamify"
    MONGO_TIMEOUT_MS: int = 5000

    # Auth
    JWT_SECRET_KEY: SecretStr = SecretStr(DEFAULT_JWT_SECRET)
    JWT_EXPIRES_DAYS: int = 7

    # Stream chat service
    STREAM_API_KEY: Optional[str] = None
    STREAM_API_SECRET: Optional[SecretStr] = None
    STREAM_BASE_URL: str = "https://chat.stream-io-api.com"

    # Frontend build served in production, relative to the working directory
    FRONTEND_DIST_DIR: Path = Path("frontend") / "dist"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("PORT")
    @classmethod
    def _port_range(cls, v: int) -> int:
        if not 1 <= v <= 65535:
            raise ValueError(f"PORT must be 1-65535, got {v}")
        return v

    @model_validator(mode="after")
    def _production_requirements(self) -> "Settings":
        if self.NODE_ENV != "production":
            return self
        if not self.FRONTEND_URL:
            raise ValueError("FRONTEND_URL is required when NODE_ENV=production")
        if self.JWT_SECRET_KEY.get_secret_value() == DEFAULT_JWT_SECRET:
            raise ValueError("JWT_SECRET_KEY must be set when NODE_ENV=production")
        return self

    @property
    def is_production(self) -> bool:
        return self.NODE_ENV == "production"

    @property
    def is_development(self) -> bool:
        return self.NODE_ENV == "development"

    @property
    def allowed_origin(self) -> str:
        return self.FRONTEND_URL or DEFAULT_FRONTEND_URL

    @property
    def log_level(self) -> str:
        if self.LOG_LEVEL:
            return self.LOG_LEVEL.upper()
        return "DEBUG" if self.is_development else "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return process settings (cached)."""
    return Settings()
