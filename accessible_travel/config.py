"""
Configuration management for the accessible travel API.
Supports the OpenAI API (or any OpenAI-compatible endpoint) and an offline mock.
"""
from pydantic_settings import BaseSettings
from typing import Literal, Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # LLM Configuration
    llm_provider: Literal["openai", "mock"] = "mock"
    llm_api_key: str = ""
    llm_base_url: Optional[str] = None
    llm_model: str = "gpt-5"

    # LLM Parameters
    llm_max_tokens: int = 4096
    llm_timeout_seconds: Optional[float] = None  # None keeps the SDK default

    # Server Configuration
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


# Global settings instance
settings = Settings()


def get_llm_config() -> dict:
    """Get keyword arguments for the OpenAI client."""
    config = {
        "api_key": settings.llm_api_key or None,
        "base_url": settings.llm_base_url or None,
        "max_retries": 0,
    }
    if settings.llm_timeout_seconds is not None:
        config["timeout"] = settings.llm_timeout_seconds
    return config
