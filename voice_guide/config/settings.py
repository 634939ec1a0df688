"""
Application settings for Brooklyn Voice Guide.
All configuration values sourced from environment variables or env files.
"""
from functools import lru_cache
from typing import List, Optional

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with validation and type safety.
    The OpenAI credential is optional here: a missing key is reported
    per request, never at startup.
    """

    # Environment
    environment: str = "development"
    service_name: str = "brooklyn-voice-guide"
    log_level: str = "INFO"

    # OpenAI credential and endpoint
    openai_api_key: Optional[SecretStr] = None
    openai_base_url: Optional[str] = None
    request_timeout_seconds: Optional[float] = None

    # Transcription
    transcription_model: str = "whisper-1"
    default_audio_mime_type: str = "audio/webm"

    # Response generation
    chat_model: str = "gpt-4"
    chat_temperature: float = 0.7
    chat_max_tokens: int = 200

    # Speech synthesis
    speech_model: str = "tts-1"
    speech_voice: str = "alloy"

    # HTTP
    cors_allow_origins: List[str] = ["*"]

    # Configuration
    model_config = SettingsConfigDict(
        env_file=[".env.local", ".env.development", ".env.staging", ".env.production"],
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() in ("development", "dev", "local")

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment.lower() in ("production", "prod")

    @property
    def has_openai_api_key(self) -> bool:
        """Check whether a non-blank OpenAI key is configured."""
        return bool(self.openai_api_key and self.openai_api_key.get_secret_value().strip())

    def get_openai_api_key(self) -> Optional[str]:
        """Return the raw OpenAI key, or None when it is missing or blank."""
        if not self.has_openai_api_key:
            return None
        return self.openai_api_key.get_secret_value().strip()


@lru_cache()
def get_settings() -> Settings:
    """Get global settings instance (singleton)."""
    return Settings()
