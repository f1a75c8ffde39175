"""
Configuration module - centralized settings for the entire application.
Uses pydantic-settings to load values from environment variables and .env file.
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Pydantic-settings automatically:
    1. Reads from environment variables (highest priority)
    2. Falls back to .env file values
    3. Uses default values if neither exists

    To enable real AI generation, set:
        export OPENAI_API_KEY=sk-...
    Without it every AI operation answers with the built-in fallback content.
    """

    # ---------------------------------------------------------------------------
    # PYDANTIC SETTINGS CONFIGURATION
    # ---------------------------------------------------------------------------
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ---------------------------------------------------------------------------
    # APPLICATION SETTINGS
    # ---------------------------------------------------------------------------
    # APP_NAME: Display name shown in API docs and the /api banner
    APP_NAME: str = "WebMaster Pro API"
    APP_VERSION: str = "1.0.0"

    # ENVIRONMENT: development exposes error messages in 500 responses
    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    # ---------------------------------------------------------------------------
    # CORS SETTINGS
    # ---------------------------------------------------------------------------
    # Frontend origins allowed to call the API (local dev + Vercel deployments)
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "https://webmaster-pro-frontend-ctj8.vercel.app",
    ]
    CORS_ORIGIN_REGEX: str = r"https://.*\.vercel\.app"

    # ---------------------------------------------------------------------------
    # AI/LLM PROVIDER SETTINGS
    # ---------------------------------------------------------------------------
    # OPENAI_API_KEY: Credential for content generation.
    # - Empty means "not ready": the service answers with canned content
    # - Read once at startup, changing it requires a restart
    OPENAI_API_KEY: str = ""

    OPENAI_MODEL: str = "gpt-4"

    # AI Request timeout in seconds (a timeout counts as a provider failure)
    AI_REQUEST_TIMEOUT: int = 30

    # ---------------------------------------------------------------------------
    # LOGGING SETTINGS
    # ---------------------------------------------------------------------------
    # LOG_LEVEL: Level of the "webmaster.ai" logger (DEBUG shows fallback events)
    LOG_LEVEL: str = "INFO"


# ---------------------------------------------------------------------------
# GLOBAL SETTINGS INSTANCE
# ---------------------------------------------------------------------------
# Usage: from app.core.config import settings
settings = Settings()
