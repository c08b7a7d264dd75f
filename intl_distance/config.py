"""
Configuration for the Intl Format Distance service.
Loads settings from environment variables with sensible defaults.
"""

import logging
import os

from babel import Locale, UnknownLocaleError
from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file (local development only)
load_dotenv()


class Settings(BaseSettings):
    """Application settings with validation"""

    # Locale used when none is requested or none of the requested ones match
    DEFAULT_LOCALE: str = os.getenv("DEFAULT_LOCALE", "en")

    # Logging Settings
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_TO_FILE: bool = os.getenv("LOG_TO_FILE", "false").lower() == "true"
    LOG_DIRECTORY: str = os.getenv("LOG_DIRECTORY", "./logs")

    # ===== FastAPI Settings =====
    APP_NAME: str = "Intl Format Distance"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    def validate_config(self) -> bool:
        """Validate required configuration"""
        try:
            Locale.parse(self.DEFAULT_LOCALE, sep="-")
        except (UnknownLocaleError, ValueError) as e:
            raise ValueError(
                f"DEFAULT_LOCALE must be a supported locale, got {self.DEFAULT_LOCALE!r}"
            ) from e

        if not isinstance(logging.getLevelName(self.LOG_LEVEL.upper()), int):
            raise ValueError(f"LOG_LEVEL must be a logging level, got {self.LOG_LEVEL!r}")

        return True

    def get_deployment_info(self) -> dict:
        """Get configuration info for debugging"""
        return {
            "app": self.APP_NAME,
            "version": self.APP_VERSION,
            "default_locale": self.DEFAULT_LOCALE,
            "log_level": self.LOG_LEVEL,
            "log_destination": self.LOG_DIRECTORY if self.LOG_TO_FILE else "console",
            "debug": self.DEBUG,
        }

    model_config = SettingsConfigDict(case_sensitive=True)


# Global settings instance
settings = Settings()

# Validate on import
settings.validate_config()
