import logging
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    # Completion API (Groq, OpenAI-compatible)
    groq_api_key: Optional[str] = Field(
        None, description="Bearer key for the chat-completions API."
    )
    groq_api_url: str = Field(
        "https://api.groq.com/openai/v1/chat/completions",
        description="Chat-completions endpoint used to compose predictions.",
    )
    groq_model: str = Field("llama3-8b-8192", description="Completion model name.")
    groq_temperature: float = Field(0.7, ge=0, le=2)
    groq_max_tokens: int = Field(1000, gt=0)

    # Standings scraping
    request_timeout_seconds: float = Field(
        10.0,
        gt=0,
        description="Time budget for a single standings page request.",
    )

    # HTTP server
    host: str = Field("127.0.0.1", description="Interface the API binds to.")
    port: int = Field(3000, description="Port the API listens on.")

    # Logging Configuration
    log_level: str = Field(
        "INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."
    )

    # Pydantic Settings Configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )


def load_settings() -> AppSettings:
    """Loads and validates application settings."""
    try:
        settings = AppSettings()
        log_level_upper = settings.log_level.upper()
        # Validate log_level even if loaded from .env
        if log_level_upper not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            logging.warning(
                f"Invalid LOG_LEVEL '{settings.log_level}' found in .env or default. Using INFO."
            )
            settings.log_level = "INFO"
        else:
            settings.log_level = log_level_upper
        return settings
    except Exception as e:
        logging.exception(f"Error loading application settings: {e}")
        raise SystemExit("Failed to load application settings. Exiting.")


settings: AppSettings = load_settings()
