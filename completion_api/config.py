"""Application configuration loaded from environment variables."""

import logging
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8080
DEFAULT_LOG_LEVEL = "INFO"
PACKAGE_STATIC_DIR = Path(__file__).resolve().parent / "static"


class Settings(BaseSettings):
    """Global application settings."""

    openrouter_api_key: Optional[str] = Field(
        default=None, description="Secret key for the OpenRouter API."
    )
    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    model: str = "meta-llama/llama-3.2-3b-instruct"
    request_timeout: float = 60.0

    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    static_dir: str = str(PACKAGE_STATIC_DIR)

    log_level: str = DEFAULT_LOG_LEVEL

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("port", mode="before")
    @classmethod
    def _fallback_port(cls, value):
        # PORT comes from the hosting platform; unusable values fall back.
        try:
            port = int(value)
        except (TypeError, ValueError):
            logger.warning("Invalid PORT %r; using %s.", value, DEFAULT_PORT)
            return DEFAULT_PORT
        if not 0 < port < 65536:
            logger.warning("PORT %s out of range; using %s.", port, DEFAULT_PORT)
            return DEFAULT_PORT
        return port

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        # getLevelName maps known names to their numeric level.
        if not isinstance(logging.getLevelName(level), int):
            logger.warning("Invalid LOG_LEVEL %r; using %s.", value, DEFAULT_LOG_LEVEL)
            return DEFAULT_LOG_LEVEL
        return level

    @property
    def static_dir_path(self) -> Path:
        return Path(self.static_dir)


settings = Settings()
