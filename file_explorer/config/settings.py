"""
Configuration settings for the application.
"""

import logging
import os

from dotenv import load_dotenv

from file_explorer.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.activity_log_file: str = self._get_env(
            "FILE_EXPLORER_ACTIVITY_LOG", "activity_log.txt"
        )
        self.copy_chunk_size: int = self._get_positive_int(
            "FILE_EXPLORER_COPY_CHUNK_SIZE", 4096
        )
        self.log_level: int = self._get_log_level("FILE_EXPLORER_LOG_LEVEL", "WARNING")

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_positive_int(self, key: str, default: int) -> int:
        """Get a strictly positive integer, raise error if malformed."""
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(f"{key} must be an integer, got {raw!r}")
        if value <= 0:
            raise ConfigurationError(f"{key} must be positive, got {value}")
        return value

    def _get_log_level(self, key: str, default: str) -> int:
        """Get a logging level by name (DEBUG, INFO, ...)."""
        name = self._get_env(key, default).strip().upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ConfigurationError(f"{key} is not a valid log level: {name!r}")
        return level


# Global settings instance
settings = Settings()
