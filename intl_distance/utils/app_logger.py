"""
Application logging for Intl Format Distance.
Tracks service events and classification decisions for debugging.
"""

import logging
import os
from datetime import datetime

from intl_distance.config import settings


class AppLogger:
    """Application logger for tracking system events"""

    _instance = None
    _logger = None

    def __new__(cls):
        """Singleton pattern to ensure one logger instance"""
        if cls._instance is None:
            cls._instance = super(AppLogger, cls).__new__(cls)
            cls._instance._initialize_logger()
        return cls._instance

    def _initialize_logger(self):
        """Set up the application logger"""
        self._logger = logging.getLogger("intl_distance")

        level = logging.getLevelName(settings.LOG_LEVEL.upper())
        if not isinstance(level, int):
            level = logging.INFO

        self._logger.setLevel(level)

        # Prevent duplicate handlers if reinitialized
        if self._logger.handlers:
            return

        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )

        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        self._logger.addHandler(console_handler)

        if settings.LOG_TO_FILE:
            os.makedirs(settings.LOG_DIRECTORY, exist_ok=True)
            log_filename = os.path.join(
                settings.LOG_DIRECTORY, f"app_{datetime.now().strftime('%Y%m%d')}.log"
            )
            file_handler = logging.FileHandler(log_filename)
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self._logger.addHandler(file_handler)

    def info(self, message: str, **kwargs):
        """Log info message with optional context"""
        self._log_with_context(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message with optional context"""
        self._log_with_context(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message with optional context"""
        self._log_with_context(logging.ERROR, message, **kwargs)

    def debug(self, message: str, **kwargs):
        """Log debug message with optional context"""
        self._log_with_context(logging.DEBUG, message, **kwargs)

    def _log_with_context(self, level: int, message: str, **kwargs):
        """Log message with additional context fields"""
        if kwargs:
            context_str = " | ".join(f"{k}={v}" for k, v in kwargs.items())
            full_message = f"{message} | {context_str}"
        else:
            full_message = message

        self._logger.log(level, full_message)  # type: ignore

    def distance_classified(self, value: int, unit: str, mode: str):
        """Log the unit and value picked for a distance"""
        self.debug("Distance classified", value=value, unit=unit, mode=mode)

    def app_started(self):
        """Log application startup"""
        self.info(
            "Application started",
            version=settings.APP_VERSION,
            default_locale=settings.DEFAULT_LOCALE,
            debug=settings.DEBUG,
        )

    def config_validation_failed(self, error: str):
        """Log configuration validation failure"""
        self.error(f"Configuration validation failed: {error}")


# Global logger instance
logger = AppLogger()
