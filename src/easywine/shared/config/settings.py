from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # General
    LOG_LEVEL: str = Field(default="INFO", description="Application log level")
    BIND: str = Field(default="0.0.0.0:8076", description="API bind address")

    # CORS
    CORS_ALLOW_ORIGINS: str = Field(default="*", description="Comma-separated list of allowed origins")
    CORS_ALLOW_CREDENTIALS: bool = Field(default=True, description="Allow credentials in CORS")
    CORS_ALLOW_METHODS: str = Field(default="*", description="Allowed CORS methods")
    CORS_ALLOW_HEADERS: str = Field(default="*", description="Allowed CORS headers")

    # LLM
    GOOGLE_API_KEY: str = Field(default="", description="Google Generative Language API key")
    GEMINI_BASE_URL: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        description="Generative Language REST base URL",
    )
    GEMINI_MODEL: str = Field(default="gemini-2.0-flash", description="Model ID used for pairings")
    MAX_TOKENS: int = Field(default=2048, description="Maximum output token count")
    TEMPERATURE: float = Field(default=0.7, description="Temperature")
    LLM_MAX_CONCURRENCY: int = Field(default=10, description="Maximum concurrency for LLM requests")
    LLM_REQUEST_TIMEOUT: int = Field(default=60, description="LLM HTTP timeout (seconds)")

    # Pairing
    PAIRING_PROMPT_FILE: Optional[str] = Field(
        default=None,
        description="Path to a text file overriding the built-in sommelier prompt",
    )
    DEFAULT_IMAGE_MIME: str = Field(
        default="image/jpeg",
        description="MIME type assumed for bare base64 images",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
