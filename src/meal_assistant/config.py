"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    gemini_api_key: str
    transcription_model: str = "gemini-1.5-flash"
    meal_model: str = "gemini-2.0-flash-exp"
    audio_mime_type: str = "audio/m4a"
    image_mime_type: str = "image/jpeg"
    timezone: str = "America/Sao_Paulo"
    image_fetch_timeout_seconds: float = 20
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
