"""Ambient logger lookup for code that is not handed a logger explicitly."""

import logging

from otel_http_logger.core.context import current_logger, use_logger
from otel_http_logger.logger import Logger

logger = logging.getLogger(__name__)

_warned_no_context = False


def get_current_logger() -> Logger:
    """Return the logger of the enclosing with_logger()/use_logger() scope.

    Outside any scope a fresh console-only Logger is returned. A warning is
    emitted the first time this happens in the process.
    """
    global _warned_no_context
    current = current_logger()
    if current is not None:
        return current
    if not _warned_no_context:
        logger.warning(
            "No logger found in current async context. Creating a console-only "
            "logger. OTEL logging is disabled."
        )
        _warned_no_context = True
    return Logger()


def create_logger(context: str) -> Logger:
    """Derive a context logger from the current logger.

    Args:
        context: The context name to prepend to log messages.

    Returns:
        A Logger sharing the current logger's backend.
    """
    return get_current_logger().new_context(context)


def reset_context_warning() -> None:
    """Allow the missing-context warning to fire again."""
    global _warned_no_context
    _warned_no_context = False


__all__ = [
    "create_logger",
    "get_current_logger",
    "reset_context_warning",
    "use_logger",
]
