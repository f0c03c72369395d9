"""
Configuration settings for the application.
"""

import os

from dotenv import load_dotenv

from tfvc_workspace.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.tfvc_location: str = self._get_env("TFVC_LOCATION", "tf")
        self.tfvc_restrict_workspace: bool = self._get_bool_env(
            "TFVC_RESTRICT_WORKSPACE", False
        )
        self.tfvc_timeout: float = self._get_float_env("TFVC_TIMEOUT", 60.0)
        self.log_level: str = self._get_env("LOG_LEVEL", "INFO").upper()

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_bool_env(self, key: str, default: bool) -> bool:
        """Get a boolean environment variable ('1', 'true', 'yes' are truthy)."""
        value = os.getenv(key)
        if value is None or not value.strip():
            return default
        return value.strip().lower() in ("1", "true", "yes", "on")

    def _get_float_env(self, key: str, default: float) -> float:
        """Get a positive number from the environment, raise error if malformed."""
        value = os.getenv(key)
        if value is None or not value.strip():
            return default
        try:
            number = float(value)
        except ValueError:
            raise ConfigurationError(
                f"Environment variable {key} must be a number, got {value!r}"
            )
        if number <= 0:
            raise ConfigurationError(f"Environment variable {key} must be positive")
        return number


# Global settings instance
settings = Settings()
