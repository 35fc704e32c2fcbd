"""Console output for the logger facade.

Console lines go through the stdlib ``otel_http_logger.console`` logger so
applications can redirect or silence them with regular logging config.
"""

import logging
import sys
from collections.abc import Mapping
from typing import Any

from otel_http_logger.core.models import LogLevel

CONSOLE_LOGGER_NAME = "otel_http_logger.console"

_STDLIB_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


def _build_console_logger() -> logging.Logger:
    console = logging.getLogger(CONSOLE_LOGGER_NAME)
    if not console.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))
        console.addHandler(handler)
        console.setLevel(logging.DEBUG)
        console.propagate = False
    return console


console_logger = _build_console_logger()


def write(
    service_name: str,
    level: LogLevel,
    message: str,
    *details: Mapping[str, Any] | BaseException | None,
) -> None:
    """Write one console line: ``[service] [LEVEL] message details...``.

    Args:
        service_name: Service name shown in the first bracket.
        level: Level tag and stdlib level to emit at.
        message: Formatted message.
        *details: Optional trailing items (attributes, an exception); empty
            ones are skipped.
    """
    parts = [f"[{service_name}] [{level.value}] {message}"]
    parts.extend(repr(d) if isinstance(d, BaseException) else str(d) for d in details if d)
    console_logger.log(_STDLIB_LEVELS[level], " ".join(parts))
