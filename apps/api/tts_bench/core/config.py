from functools import lru_cache
from typing import Any

from pydantic import ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_INTEGER_FIELDS = frozenset(
    {"gemini_tts_sample_rate", "inworld_tts_sample_rate", "inworld_tts_bit_rate"}
)


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    app_name: str = "TTS Bench API"
    app_version: str = "0.1.0"

    database_url: str = "sqlite+pysqlite:///./local.db"
    database_echo: bool = False

    cors_allowed_origins: str | list[str] = "http://localhost:3000"

    # Outbound synthesis calls
    tts_timeout_seconds: float = 60.0

    # OpenAI
    openai_api_key: str = ""
    openai_tts_model: str = "gpt-4o-mini-tts"
    openai_tts_voice: str = "alloy"

    # ElevenLabs
    elevenlabs_api_key: str = ""
    elevenlabs_model_id: str = "eleven_multilingual_v2"
    elevenlabs_voice_id: str = "21m00Tcm4TlvDq8ikWAM"
    elevenlabs_voice_stability: float = 0.4
    elevenlabs_voice_similarity: float = 0.75

    # Gemini
    gemini_api_key: str = ""
    gemini_tts_model: str = "gemini-2.5-flash-preview-tts"
    gemini_tts_voice: str = "Kore"
    gemini_tts_sample_rate: int = 24000

    # Inworld (the only provider whose encoding is configurable)
    inworld_basic_auth: str = ""
    inworld_tts_model: str = "inworld-tts-1"
    inworld_tts_voice: str = "Dennis"
    inworld_tts_encoding: str = "MP3"
    inworld_tts_speaking_rate: float | None = None
    inworld_tts_sample_rate: int | None = None
    inworld_tts_bit_rate: int | None = None
    inworld_tts_temperature: float | None = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator(
        "tts_timeout_seconds",
        "elevenlabs_voice_stability",
        "elevenlabs_voice_similarity",
        "gemini_tts_sample_rate",
        "inworld_tts_speaking_rate",
        "inworld_tts_sample_rate",
        "inworld_tts_bit_rate",
        "inworld_tts_temperature",
        mode="before",
    )
    @classmethod
    def _fallback_on_unparseable_number(cls, value: Any, info: ValidationInfo) -> Any:
        """Blank or non-numeric values fall back to the field default."""
        if not isinstance(value, str):
            return value

        default = cls.model_fields[info.field_name].default
        candidate = value.strip()
        if not candidate:
            return default

        try:
            if info.field_name in _INTEGER_FIELDS:
                # "24000.0" still counts as an integer setting
                return int(float(candidate))
            return float(candidate)
        except (ValueError, OverflowError):
            return default

    @property
    def resolved_cors_allowed_origins(self) -> list[str]:
        """Return the configured CORS origins as a normalized list."""

        if isinstance(self.cors_allowed_origins, str):
            return [
                origin.strip()
                for origin in self.cors_allowed_origins.split(",")
                if origin.strip()
            ]

        return list(self.cors_allowed_origins)


@lru_cache
def get_settings() -> Settings:
    """Cache settings to avoid re-parsing environment files."""
    return Settings()
