"""errchain configuration.

Settings are read once from the environment and held by ``ConfigRegistry``.
Applications may override them at startup with ``ConfigRegistry.set_config``.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class LogLevel(str, Enum):
    """Log verbosity level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"

    def to_logging(self) -> int:
        """Return the matching ``logging`` module level."""
        return {
            LogLevel.DEBUG: logging.DEBUG,
            LogLevel.INFO: logging.INFO,
            LogLevel.WARN: logging.WARNING,
            LogLevel.ERROR: logging.ERROR,
        }[self]


@dataclass
class ChainConfig:
    """Library settings."""

    # Record the creation site of every ChainError
    capture_locations: bool = True

    # Level of the errchain.* loggers
    log_level: LogLevel = LogLevel.WARN

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "ChainConfig":
        """Build a configuration from ``ERRCHAIN_*`` environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)

        Returns:
            ChainConfig with defaults for unset variables

        Raises:
            ValueError: If a variable is set to an unrecognized value
        """
        env = os.environ if environ is None else environ
        config = cls()

        raw_capture = env.get("ERRCHAIN_CAPTURE_LOCATIONS")
        if raw_capture is not None:
            config.capture_locations = _parse_bool("ERRCHAIN_CAPTURE_LOCATIONS", raw_capture)

        raw_level = env.get("ERRCHAIN_LOG_LEVEL")
        if raw_level is not None:
            try:
                config.log_level = LogLevel(raw_level.strip().upper())
            except ValueError:
                msg = f"Invalid ERRCHAIN_LOG_LEVEL: {raw_level!r}"
                raise ValueError(msg) from None

        return config


def _parse_bool(name: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    msg = f"Invalid {name}: {value!r}"
    raise ValueError(msg)


class ConfigRegistry:
    """
    Singleton for configuration access.

    Loaded lazily from the environment on first use.
    """

    _instance: "ConfigRegistry | None" = None
    _config: ChainConfig | None = None

    @classmethod
    def get(cls) -> "ConfigRegistry":
        if cls._instance is None:
            try:
                config = ChainConfig.from_env()
                invalid = None
            except ValueError as e:
                config = ChainConfig()
                invalid = e
            instance = cls()
            instance._config = config
            cls._instance = instance
            if invalid is not None:
                # Logger setup reads the config, so warn once the registry exists
                from errchain.telemetry.logging import get_logger

                get_logger("config").warning(
                    "Ignoring invalid environment, using defaults", reason=str(invalid)
                )
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the registry (for testing)."""
        cls._instance = None

    @property
    def config(self) -> ChainConfig:
        """Current configuration."""
        if self._config is None:
            self._config = ChainConfig()
        return self._config

    def set_config(self, config: ChainConfig) -> None:
        """Replace the current configuration.

        Args:
            config: New configuration
        """
        self._config = config


def get_config() -> ChainConfig:
    """Return the active configuration."""
    return ConfigRegistry.get().config
