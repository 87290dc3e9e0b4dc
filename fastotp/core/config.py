"""
Configuration settings for the FastOTP client.

Uses Pydantic Settings for environment variable management. Every variable is
read with the FASTOTP_ prefix so the host application's own DEBUG, ENV or
LOG_LEVEL are left alone.
"""

import os
from typing import Optional
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings


DEFAULT_BASE_URL = "https://api.fastotp.co"
DEFAULT_TIMEOUT = 10.0

ENV_PREFIX = "FASTOTP_"


class Settings(BaseSettings):
    """Client settings, read from FASTOTP_* variables."""

    # Environment
    ENV: str = Field(default="development")
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO")

    # FastOTP API
    BASE_URL: str = Field(default=DEFAULT_BASE_URL)
    TIMEOUT: float = Field(default=DEFAULT_TIMEOUT)
    API_KEY: Optional[SecretStr] = Field(default=None)

    @property
    def base_url(self) -> str:
        return self.BASE_URL.rstrip("/")

    class Config:
        env_prefix = ENV_PREFIX
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


def get_env_file() -> str:
    """Get the appropriate environment file based on FASTOTP_ENV."""
    env_file = f".env.{os.getenv(ENV_PREFIX + 'ENV', 'development')}"
    if os.path.exists(env_file):
        return env_file
    return ".env"


# Create settings instance
settings = Settings(_env_file=get_env_file())
