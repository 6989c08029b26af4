"""supportkit configuration via environment / .env file."""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_ENDPOINT = "https://openrouter.ai/api/v1/chat/completions"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SUPPORTKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Endpoint ---
    API_ENDPOINT: str = DEFAULT_API_ENDPOINT
    API_KEY: str = ""

    # --- Timeouts (seconds) ---
    RESPONSE_TIMEOUT: float = 40.0
    HTTP_TIMEOUT: float = 60.0

    # --- Logging ---
    LOG_LEVEL: str = "WARNING"

    @field_validator("API_ENDPOINT", mode="before")
    @classmethod
    def _strip_endpoint(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("API_ENDPOINT cannot be empty")
        return v

    @field_validator("RESPONSE_TIMEOUT", "HTTP_TIMEOUT")
    @classmethod
    def _positive_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("timeouts must be greater than 0")
        return v

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return str(v).upper()


settings = Settings()
