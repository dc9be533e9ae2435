from __future__ import annotations

from typing import Optional

from dotenv import find_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_PORT = 3000


class Settings(BaseSettings):
    """Process-wide settings from environment variables (and .env)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    # Gemini
    gemini_api_key: Optional[str] = None
    gemini_base_url: str = DEFAULT_BASE_URL
    gemini_model: str = DEFAULT_MODEL
    gemini_timeout: Optional[float] = None  # None -> transport default

    # Server
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT

    # Observability
    log_level: str = "INFO"
    log_format: str = "text"

    @field_validator("gemini_api_key", mode="before")
    @classmethod
    def blank_key_is_none(cls, v):
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator("gemini_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("log_format")
    @classmethod
    def lower_format(cls, v: str) -> str:
        return v.lower()


def load_settings() -> Settings:
    # Look for .env upwards from the working directory, like a plain load_dotenv() would
    return Settings(_env_file=find_dotenv(usecwd=True) or None)
