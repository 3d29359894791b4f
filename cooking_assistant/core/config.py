from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central application configuration."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_env: str = "local"
    api_prefix: str = "/api"
    port: int = 4000
    database_url: str = "sqlite+aiosqlite:///./cooking_assistant.db"
    auto_create_tables: bool = True  # 로컬 실행 시 kv_store 테이블 자동 생성
    cors_allow_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Access token settings
    token_secret_key: str = "replace-this-token-secret-key-in-production"
    token_salt: str = "cooking-assistant-access-token"
    token_max_age: int = 60 * 60 * 24 * 7  # 7 days in seconds

    # Redis settings (optional, for assistant conversation state)
    redis_url: str | None = None  # e.g., "redis://localhost:6379/0"
    assistant_session_ttl: int = 60 * 60 * 3  # 3 hours in seconds

    # AI/voice settings
    openai_api_key: str | None = None
    openai_model: str = "gpt-4o"
    google_cloud_api_key: str | None = None
    google_speech_url: str = "https://speech.googleapis.com/v1/speech:recognize"
    google_tts_url: str = "https://texttospeech.googleapis.com/v1/text:synthesize"
    speech_language_code: str = "ko-KR"
    tts_voice_name: str = "ko-KR-Standard-A"
    voice_request_timeout: float = 30.0

    @field_validator("cors_allow_origins", mode="before")
    @classmethod
    def split_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, list):
            return value
        if not value:
            return ["*"]
        return [origin.strip() for origin in value.split(",")]


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
