"""Call-stack scoped slot holding the current logger.

Backed by a ContextVar, so each asyncio task sees the logger that was
current when it was created and concurrent scopes stay isolated.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from otel_http_logger.logger import Logger

_current_logger: ContextVar["Logger | None"] = ContextVar(
    "otel_http_logger_current", default=None
)


def current_logger() -> "Logger | None":
    """Return the logger installed in the current context, if any."""
    return _current_logger.get()


@contextmanager
def use_logger(logger: "Logger") -> Iterator["Logger"]:
    """Install logger as the current logger for the duration of the block.

    Args:
        logger: Logger to make current.

    Yields:
        The installed logger.
    """
    token = _current_logger.set(logger)
    try:
        yield logger
    finally:
        _current_logger.reset(token)
