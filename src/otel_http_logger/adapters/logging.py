"""Python logging handler adapter for otel_http_logger.

This adapter bridges Python's standard library logging module to the OTLP
backend of a Logger, so records from third-party libraries end up in the
same batch and trace as the application's own logs.
"""

import logging

from otel_http_logger.core.context import current_logger
from otel_http_logger.core.models import LogLevel
from otel_http_logger.logger import Logger, error_attributes

# Standard LogRecord attributes that should not be treated as extra fields
_STANDARD_LOGRECORD_ATTRS = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)


# Loggers whose output is produced while flushing; forwarding them would refill
# the queue on every flush.
_IGNORED_LOGGER_PREFIXES = ("otel_http_logger", "httpx", "httpcore")


def _is_ignored(name: str) -> bool:
    return any(
        name == prefix or name.startswith(prefix + ".")
        for prefix in _IGNORED_LOGGER_PREFIXES
    )


def _map_level(levelno: int) -> LogLevel:
    if levelno >= logging.ERROR:
        return LogLevel.ERROR
    if levelno >= logging.WARNING:
        return LogLevel.WARN
    if levelno >= logging.INFO:
        return LogLevel.INFO
    return LogLevel.DEBUG


class OtelHttpLoggerHandler(logging.Handler):
    """Logging handler that queues stdlib records on a Logger's backend.

    Records are not echoed to the console; only the OTLP backend receives
    them. Records from this package and from httpx/httpcore are skipped.
    Without an explicit logger the current ambient logger is used, and
    records emitted outside any logger scope are dropped.

    Example:
        ```python
        handler = OtelHttpLoggerHandler()
        logging.getLogger("sqlalchemy").addHandler(handler)
        ```
    """

    def __init__(self, logger: Logger | None = None, level: int = logging.NOTSET) -> None:
        """Initialize the handler.

        Args:
            logger: Logger whose backend receives records. Defaults to the
                current ambient logger at emit time.
            level: Minimum stdlib level handled.
        """
        super().__init__(level)
        self._logger = logger

    def emit(self, record: logging.LogRecord) -> None:
        """Queue a log record on the target backend.

        Args:
            record: The log record to emit.
        """
        if _is_ignored(record.name):
            return

        target = self._logger or current_logger()
        if target is None or target.backend is None:
            return

        attributes: dict[str, object] = {
            "logger.name": record.name,
            "code.function": record.funcName or "",
            "code.lineno": record.lineno,
        }

        # Add any extra attributes passed via logging call
        for key, value in record.__dict__.items():
            if key not in _STANDARD_LOGRECORD_ATTRS:
                attributes[key] = value

        if record.exc_info and record.exc_info[1] is not None:
            attributes.update(error_attributes(record.exc_info[1]))

        try:
            message = record.getMessage()
            if target.context_prefix:
                message = f"[{target.context_prefix}] {message}"
            target.backend.create_log_record(
                _map_level(record.levelno), message, attributes
            )
        except Exception:
            self.handleError(record)
