"""OTLP/HTTP batching transport.

Records are queued in memory and shipped as one OTLP JSON envelope per
flush. Failed deliveries are retried with linear backoff; once retries are
exhausted the batch is put back at the front of the queue for the next flush.
"""

import asyncio
import logging
import time
from collections.abc import Callable, Mapping
from typing import Any

import httpx

from otel_http_logger.core.encoding.otlp import encode_json
from otel_http_logger.core.errors import OtelHttpLoggerError
from otel_http_logger.core.ids import generate_span_id, generate_trace_id
from otel_http_logger.core.models import LogLevel, LogRecord, OtelConfig
from otel_http_logger.core.records import build_log_record, next_timestamp

logger = logging.getLogger(__name__)

DEFAULT_MAX_RETRIES = 3
DEFAULT_RETRY_DELAY = 1.0
DEFAULT_TIMEOUT = 10.0


class DeliveryError(OtelHttpLoggerError):
    """Raised internally when the collector answers with a non-2xx status."""

    def __init__(self, status_code: int, reason: str) -> None:
        super().__init__(f"HTTP error {status_code}: {reason}")
        self.status_code = status_code


class OtelBackend:
    """Batching OTLP/HTTP implementation of LogTransportPort.

    One backend is created per root Logger and shared by reference with every
    context logger derived from it. The root trace and span ids are fixed at
    construction. Flushes are expected to run sequentially; overlapping
    flush() calls on one backend are not supported.

    Args:
        config: Endpoint, headers, service name and environment.
        max_retries: Retries after the first failed attempt.
        retry_delay: Base backoff in seconds; attempt n waits n * retry_delay.
        timeout: Per-request timeout in seconds.
        transport: Optional httpx transport (e.g. httpx.MockTransport).
        clock: Nanosecond wall clock, defaults to time.time_ns.
        emit_root_span_record: Enqueue one record for the root span on creation.
    """

    def __init__(
        self,
        config: OtelConfig,
        *,
        max_retries: int = DEFAULT_MAX_RETRIES,
        retry_delay: float = DEFAULT_RETRY_DELAY,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
        clock: Callable[[], int] = time.time_ns,
        emit_root_span_record: bool = False,
    ) -> None:
        self._trace_id = generate_trace_id()
        self._span_id = generate_span_id()
        self.endpoint = config.endpoint
        self.headers = {"Content-Type": "application/json", **config.headers}
        self.service_name = config.service_name
        self.environment = config.environment
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self._timeout = timeout
        self._transport = transport
        self._clock = clock
        self._queue: list[LogRecord] = []
        self._last_timestamp = 0

        if emit_root_span_record:
            self.create_log_record(
                LogLevel.INFO,
                f"{self.service_name} logger started",
                is_root_span=True,
            )

    def get_trace_id(self) -> str:
        """Return the root trace id."""
        return self._trace_id

    def get_span_id(self) -> str:
        """Return the root span id."""
        return self._span_id

    @property
    def pending(self) -> list[LogRecord]:
        """Snapshot of records waiting for the next flush."""
        return list(self._queue)

    def _next_timestamp(self) -> int:
        self._last_timestamp = next_timestamp(self._clock(), self._last_timestamp)
        return self._last_timestamp

    def create_log_record(
        self,
        level: LogLevel,
        message: str,
        attributes: Mapping[str, Any] | None = None,
        is_root_span: bool = False,
    ) -> LogRecord:
        """Build a record with this backend's correlation ids and enqueue it.

        Args:
            level: Severity of the record.
            message: Already formatted message.
            attributes: Extra attributes, coerced to strings.
            is_root_span: Use the root span id and omit parent.id.

        Returns:
            The enqueued LogRecord.
        """
        record = build_log_record(
            level,
            message,
            attributes,
            timestamp_ns=self._next_timestamp(),
            trace_id=self._trace_id,
            span_id=self._span_id if is_root_span else generate_span_id(),
            parent_span_id=None if is_root_span else self._span_id,
            service_name=self.service_name,
            environment=self.environment,
        )
        self.enqueue(record)
        return record

    def enqueue(self, record: LogRecord) -> None:
        """Append a record to the outbound queue. Never blocks."""
        self._queue.append(record)

    async def flush(self) -> bool:
        """Send all queued records to the OTLP endpoint.

        Never raises for delivery problems: network errors, error statuses,
        invalid endpoints and unencodable headers all count as failed attempts.

        Returns:
            True if the batch was delivered, the queue was empty or no
            endpoint is configured. False if delivery was abandoned after
            max_retries retries; the batch is then back at the queue front.
        """
        if not self._queue:
            return True

        batch, self._queue = self._queue, []

        if not self.endpoint:
            logger.info(
                "[%s] No OTLP endpoint configured, skipping log transmission",
                self.service_name,
            )
            return True

        try:
            delivered = await self._deliver(batch)
        except Exception as exc:
            logger.error("[%s] Failed to send logs: %s", self.service_name, exc)
            delivered = False
        if not delivered:
            # Records enqueued during the attempt stay behind the batch.
            self._queue = batch + self._queue
        return delivered

    async def _deliver(self, batch: list[LogRecord]) -> bool:
        body = encode_json(batch, self.service_name, self.environment)
        retries = 0
        async with httpx.AsyncClient(
            transport=self._transport, timeout=self._timeout
        ) as client:
            while True:
                try:
                    await self._send(client, body)
                except Exception as exc:
                    retries += 1
                    if retries > self.max_retries:
                        logger.error(
                            "[%s] Failed to send logs after %d retries: %s",
                            self.service_name,
                            self.max_retries,
                            exc,
                        )
                        return False
                    logger.warning(
                        "[%s] Error sending logs (retry %d/%d): %s",
                        self.service_name,
                        retries,
                        self.max_retries,
                        exc,
                    )
                    await asyncio.sleep(self.retry_delay * retries)
                else:
                    logger.info(
                        "[%s] Successfully sent %d logs to OTLP endpoint",
                        self.service_name,
                        len(batch),
                    )
                    return True

    async def _send(self, client: httpx.AsyncClient, body: str) -> None:
        response = await client.post(self.endpoint, content=body, headers=self.headers)
        if not response.is_success:
            raise DeliveryError(response.status_code, response.reason_phrase)
