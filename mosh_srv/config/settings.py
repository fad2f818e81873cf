"""Application settings from environment variables.

Centralized environment variable parsing and validation.
"""

import logging
import os
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Application settings from environment.

    Handles parsing, validation, and defaults for all env vars.
    """

    # Logging
    log_level: str = field(default="INFO")
    log_colors: bool = field(default=True)

    # DNS
    dns_lifetime: float | None = field(default=None)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from MOSH_SRV_* environment variables.

        Returns:
            Settings instance with values from environment
        """
        return cls(
            log_level=cls._get_log_level("MOSH_SRV_LOG_LEVEL", "INFO"),
            log_colors=cls._get_bool("MOSH_SRV_LOG_COLORS", True),
            dns_lifetime=cls._get_float("MOSH_SRV_DNS_LIFETIME", None),
        )

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        """Get boolean from environment.

        Args:
            key: Environment variable key
            default: Default value if not set

        Returns:
            Boolean value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ("1", "true", "yes", "on")

    @staticmethod
    def _get_float(key: str, default: float | None) -> float | None:
        """Get a positive float from environment.

        Args:
            key: Environment variable key
            default: Default value if not set or invalid

        Returns:
            Float value from environment or default
        """
        value = os.getenv(key)
        if value is None or not value.strip():
            return default

        try:
            parsed = float(value)
        except ValueError:
            logger.warning("Invalid float for %s: %s, using default %s", key, value, default)
            return default

        if parsed <= 0:
            logger.warning("Non-positive value for %s: %s, using default %s", key, value, default)
            return default
        return parsed

    @staticmethod
    def _get_log_level(key: str, default: str) -> str:
        """Get a logging level name from environment.

        Args:
            key: Environment variable key
            default: Level name used when unset or unknown

        Returns:
            Upper-case level name known to the logging module
        """
        value = os.getenv(key, default).strip().upper()
        if value not in logging.getLevelNamesMapping():
            logger.warning("Invalid log level for %s: %s, using default %s", key, value, default)
            return default
        return value
