"""
Configuration Module

This module provides configuration settings for the application.
It loads environment variables from a .env file and provides default values.

"""

import os
import json
from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from dotenv import load_dotenv
from typing import Annotated, List

# Load environment variables from .env file
load_dotenv()

class Settings(BaseSettings):
    """
    Application settings loaded from environment variables with defaults.
    Settings are validated using Pydantic's BaseSettings.
    """

    # Core settings
    PROJECT_NAME: str = "Precision Scout"
    VERSION: str = "1.0.0"

    # Environment
    ENVIRONMENT: str = "development"

    # CORS Settings
    CORS_ORIGINS: Annotated[List[str], NoDecode] = ["http://localhost:3000", "http://localhost:8000"]

    # OpenAI configuration (empty key switches enrichment to mock mode)
    OPENAI_API_KEY: str = ""
    OPENAI_MODEL: str = "gpt-4.1-mini"
    OPENAI_TEMPERATURE: float = 0.2

    # Website fetching
    FETCH_TIMEOUT: int = 15
    FETCH_MAX_RETRIES: int = 3
    FETCH_USER_AGENT: str = "PrecisionScoutBot/1.0 (+https://example.com; contact: dev@example.com)"
    WEBSITE_TEXT_LIMIT: int = 20_000
    PROMPT_TEXT_LIMIT: int = 8_000

    # Redis
    REDIS_URL: str = "redis://localhost:6379/0"
    ENRICHMENT_CACHE_TTL: int = 7 * 24 * 3600

    # Logging configuration
    LOG_LEVEL: str = "INFO"

    # Get project root directory
    PROJECT_ROOT: str = os.path.abspath(os.path.join(os.path.dirname(__file__), "../../../"))

    # Set all data directories relative to the project root
    DATA_DIR: str = os.path.join(PROJECT_ROOT, "data")
    LOGS_DIR: str = os.path.join(PROJECT_ROOT, "data", "logs")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("CORS_ORIGINS", mode="before")
    def parse_origins(cls, v):
        if isinstance(v, str):
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                return [x.strip() for x in v.split(",") if x.strip()]
        return v

    @field_validator("LOG_LEVEL")
    def normalize_log_level(cls, v):
        return v.upper()

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # Create all data directories
        for dir_path in [self.DATA_DIR, self.LOGS_DIR]:
            os.makedirs(dir_path, exist_ok=True)

    @property
    def mock_enrichment(self) -> bool:
        """True when no OpenAI key is configured."""
        return not self.OPENAI_API_KEY

# Create settings instance
settings = Settings()

