from __future__ import annotations

import os
from typing import Final

from .logger import log


class ConfigError(Exception):
    """Configuration validation error."""

    pass


class Config:
    """timeglance configuration with environment variable support and validation."""

    # Default values
    _DEFAULT_REFRESH_INTERVAL: Final[float] = 15.0
    _DEFAULT_MAX_ROWS: Final[int] = 500

    # Validation bounds
    _MIN_REFRESH_INTERVAL: Final[float] = 0.5
    _MAX_REFRESH_INTERVAL: Final[float] = 3600.0
    _MIN_MAX_ROWS: Final[int] = 1
    _MAX_MAX_ROWS: Final[int] = 100000

    def __init__(self):
        """Initialize configuration with environment variable overrides."""
        self.refresh_interval = self._get_float_env("TIMEGLANCE_REFRESH_INTERVAL", self._DEFAULT_REFRESH_INTERVAL)
        self.max_rows = self._get_int_env("TIMEGLANCE_MAX_ROWS", self._DEFAULT_MAX_ROWS)

        self._validate_all()

    def _get_int_env(self, key: str, default: int) -> int:
        """Get integer environment variable with fallback to default."""
        value = os.environ.get(key)
        if value is None:
            return default

        try:
            return int(value)
        except ValueError as e:
            log.warning(f"[CONFIG] Invalid integer value for {key}='{value}', using default {default}: {e}")
            return default

    def _get_float_env(self, key: str, default: float) -> float:
        """Get float environment variable with fallback to default."""
        value = os.environ.get(key)
        if value is None:
            return default

        try:
            return float(value)
        except ValueError as e:
            log.warning(f"[CONFIG] Invalid float value for {key}='{value}', using default {default}: {e}")
            return default

    def _validate_all(self) -> None:
        """Validate all configuration values."""
        self._validate_float(
            "refresh_interval", self.refresh_interval, self._MIN_REFRESH_INTERVAL, self._MAX_REFRESH_INTERVAL
        )
        self._validate_int("max_rows", self.max_rows, self._MIN_MAX_ROWS, self._MAX_MAX_ROWS)

    def _validate_int(self, name: str, value: int, min_val: int, max_val: int) -> None:
        """Validate integer configuration value."""
        if not isinstance(value, int) or isinstance(value, bool):
            raise ConfigError(f"{name} must be an integer, got {type(value).__name__}")
        if not (min_val <= value <= max_val):
            raise ConfigError(f"{name} must be between {min_val} and {max_val}, got {value}")

    def _validate_float(self, name: str, value: float, min_val: float, max_val: float) -> None:
        """Validate float configuration value."""
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise ConfigError(f"{name} must be a number, got {type(value).__name__}")
        if not (min_val <= value <= max_val):
            raise ConfigError(f"{name} must be between {min_val} and {max_val}, got {value}")

    def __repr__(self) -> str:
        return f"Config(refresh_interval={self.refresh_interval}, max_rows={self.max_rows})"


# Global configuration instance
config = Config()
