"""errchain telemetry - structured logging."""

from .logging import ChainLogger, StructuredLogFormatter, get_logger, reset_loggers

__all__ = [
    "ChainLogger",
    "StructuredLogFormatter",
    "get_logger",
    "reset_loggers",
]
