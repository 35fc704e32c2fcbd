"""Port interface for log transports.

The logger facade depends only on this protocol, not on a concrete transport.
"""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from otel_http_logger.core.models import LogLevel, LogRecord


@runtime_checkable
class LogTransportPort(Protocol):
    """Port for batching log transports.

    Examples: OtelBackend.
    """

    def create_log_record(
        self,
        level: LogLevel,
        message: str,
        attributes: Mapping[str, Any] | None = None,
        is_root_span: bool = False,
    ) -> LogRecord:
        """Build a record with the transport's correlation ids and enqueue it."""
        ...

    def enqueue(self, record: LogRecord) -> None:
        """Append a record to the outbound queue."""
        ...

    async def flush(self) -> bool:
        """Deliver queued records.

        Returns:
            True on success (or nothing to send), False if delivery was abandoned.
        """
        ...

    def get_trace_id(self) -> str:
        """Return the root trace id."""
        ...

    def get_span_id(self) -> str:
        """Return the root span id."""
        ...
