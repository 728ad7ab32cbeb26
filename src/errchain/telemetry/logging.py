"""errchain logging - Structured JSON logging with trace context.

Records carry the active OpenTelemetry trace and span ids when a span is
recording, so library diagnostics line up with the host application's traces.

Usage:
    from errchain.telemetry.logging import get_logger

    logger = get_logger("errors")
    logger.debug("Comparison skipped", error_type="KeyError")
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from opentelemetry import trace

from errchain.config import get_config

# LogRecord attributes that are not user-supplied extras
_RESERVED_FIELDS = frozenset(
    {
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "pathname", "process", "processName", "relativeCreated",
        "stack_info", "exc_info", "exc_text", "thread", "threadName",
        "message", "taskName",
    }
)


class StructuredLogFormatter(logging.Formatter):
    """JSON formatter with trace context injection.

    Formats log records as JSON with:
    - timestamp (ISO 8601)
    - level
    - component (logger name)
    - message
    - trace_id / span_id (if a span is recording)
    - Additional fields from extra
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON-formatted log string
        """
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "component": record.name,
            "message": record.getMessage(),
        }

        span = trace.get_current_span()
        if span and span.is_recording():
            ctx = span.get_span_context()
            if ctx.is_valid:
                log_data["trace_id"] = format(ctx.trace_id, "032x")
                log_data["span_id"] = format(ctx.span_id, "016x")

        for key, value in record.__dict__.items():
            if key not in _RESERVED_FIELDS:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class ChainLogger:
    """Structured logger for errchain components.

    Wraps a stdlib logger named ``errchain.<name>`` and passes keyword
    arguments through as structured fields.
    """

    def __init__(self, name: str, level: int | None = None):
        """Initialize logger.

        Args:
            name: Logger name (component name)
            level: Logging level (defaults to the configured level)
        """
        self._logger = logging.getLogger(f"errchain.{name}")
        self._logger.setLevel(level if level is not None else get_config().log_level.to_logging())

        if not self._logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(StructuredLogFormatter())
            self._logger.addHandler(handler)

    def is_enabled_for(self, level: int) -> bool:
        """Check whether a record at ``level`` would be emitted."""
        return self._logger.isEnabledFor(level)

    def _log(self, level: int, message: str, **kwargs: Any) -> None:
        self._logger.log(level, message, extra=kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log debug message."""
        self._log(logging.DEBUG, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log warning message."""
        self._log(logging.WARNING, message, **kwargs)


# Logger cache
_loggers: dict[str, ChainLogger] = {}


def get_logger(name: str, level: int | None = None) -> ChainLogger:
    """Get or create a structured logger.

    Args:
        name: Logger name (component name)
        level: Logging level (defaults to the configured level)

    Returns:
        ChainLogger instance
    """
    if name not in _loggers:
        _loggers[name] = ChainLogger(name, level)
    return _loggers[name]


def reset_loggers() -> None:
    """Reset logger cache (for testing)."""
    global _loggers
    _loggers = {}
