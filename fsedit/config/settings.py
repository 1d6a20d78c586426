"""
Configuration settings for the application.
"""

import logging
import os

from dotenv import load_dotenv

from fsedit.entities.encoding import FileEncoding
from fsedit.exceptions import ConfigurationError, SchemaError
from fsedit.utils.workspace import dedupe_roots, split_roots

# Load environment variables from .env file
_ = load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.roots: list[str] = self._get_roots("FSEDIT_ROOTS")
        self.default_encoding: FileEncoding = self._get_encoding(
            "FSEDIT_DEFAULT_ENCODING", "utf8"
        )
        self.max_diff_bytes: int = self._get_int("FSEDIT_MAX_DIFF_BYTES", 20_000)
        self.log_level: int = self._get_log_level("FSEDIT_LOG_LEVEL", "INFO")
        self.host: str = self._get_env("HOST", "127.0.0.1")
        self.port: int = self._get_int("PORT", 8000)
        self.reload: bool = self._get_env("RELOAD", "0") in {"1", "true", "True"}

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_int(self, key: str, default: int) -> int:
        """Get a non-negative integer environment variable."""
        raw = os.getenv(key)
        if raw is None or not raw.strip():
            return default
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be an integer (got {raw!r})")
        if value < 0:
            raise ConfigurationError(f"Environment variable {key} must not be negative")
        return value

    def _get_roots(self, key: str) -> list[str]:
        """Get the accessible roots; defaults to the current working directory."""
        roots = dedupe_roots(split_roots(os.getenv(key, "")))
        if not roots:
            return [os.path.abspath(os.getcwd())]
        missing = [r for r in roots if not os.path.isdir(r)]
        if missing:
            raise ConfigurationError(f"Accessible roots do not exist: {', '.join(missing)}")
        return roots

    def _get_encoding(self, key: str, default: str) -> FileEncoding:
        try:
            return FileEncoding.parse(self._get_env(key, default)).writable()
        except SchemaError as e:
            raise ConfigurationError(f"Environment variable {key}: {e}")

    def _get_log_level(self, key: str, default: str) -> int:
        name = self._get_env(key, default).strip().upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ConfigurationError(f"Environment variable {key} is not a log level: {name}")
        return level


# Global settings instance
settings = Settings()
