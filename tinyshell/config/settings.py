"""
Configuration settings for the shell.
"""

import codecs
import logging
import os

from dotenv import load_dotenv

from tinyshell.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()


class Settings:
    """Shell settings loaded from environment variables."""

    def __init__(self):
        self.encoding: str = self._get_encoding_env("TINYSHELL_ENCODING", "utf-8")
        self.default_download: str = self._get_env(
            "TINYSHELL_DEFAULT_DOWNLOAD", "download"
        )
        self.chunk_size: int = self._get_int_env("TINYSHELL_CHUNK_SIZE", 65536)
        self.max_line_length: int = self._get_int_env(
            "TINYSHELL_MAX_LINE_LENGTH", 65536
        )
        self.http_timeout: float = self._get_float_env("TINYSHELL_HTTP_TIMEOUT", 30.0)
        self.log_level: str = self._get_log_level_env("TINYSHELL_LOG_LEVEL", "WARNING")

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        value = os.getenv(key)
        return value if value else default

    def _get_int_env(self, key: str, default: int) -> int:
        """Get a strictly positive integer environment variable."""
        raw = self._get_env(key, str(default))
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be an integer, got {raw!r}")
        if value <= 0:
            raise ConfigurationError(f"Environment variable {key} must be positive, got {value}")
        return value

    def _get_float_env(self, key: str, default: float) -> float:
        """Get a strictly positive number of seconds."""
        raw = self._get_env(key, str(default))
        try:
            value = float(raw)
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be a number, got {raw!r}")
        if value <= 0:
            raise ConfigurationError(f"Environment variable {key} must be positive, got {value}")
        return value

    def _get_encoding_env(self, key: str, default: str) -> str:
        """Get a text encoding name known to the codecs registry."""
        value = self._get_env(key, default)
        try:
            codecs.lookup(value)
        except LookupError:
            raise ConfigurationError(f"Environment variable {key} names an unknown encoding: {value}")
        return value

    def _get_log_level_env(self, key: str, default: str) -> str:
        """Get a logging level name."""
        value = self._get_env(key, default).upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ConfigurationError(f"Environment variable {key} is not a log level: {value}")
        return value


# Global settings instance
settings = Settings()
