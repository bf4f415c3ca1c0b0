"""Configuration for the QStash client."""

from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://qstash.upstash.io"


class Settings(BaseSettings):
    """Client configuration, read from ``QSTASH_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="QSTASH_",
        extra="ignore",
    )

    # API access
    token: SecretStr = Field(default=SecretStr(""))
    url: str = Field(default=DEFAULT_BASE_URL)
    timeout_seconds: float = Field(default=30.0, gt=0)

    # Webhook verification
    current_signing_key: SecretStr = Field(default=SecretStr(""))
    next_signing_key: SecretStr = Field(default=SecretStr(""))

    # Logging
    log_level: str = Field(default="INFO")
    log_format: Literal["json", "console"] = Field(default="console")


def get_settings() -> Settings:
    """Get settings from the environment."""
    return Settings()
