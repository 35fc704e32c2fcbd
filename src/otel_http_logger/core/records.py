"""Record builder turning log calls into wire-shaped LogRecord objects."""

import json
from collections.abc import Mapping
from typing import Any

from otel_http_logger.core.models import LogLevel, LogRecord, severity_number


def coerce_attribute_value(value: Any) -> str:
    """Convert an attribute value to its string form.

    Dicts, lists and tuples are JSON-encoded; everything else goes through str().
    Objects that JSON cannot encode fall back to str(). Booleans and None use
    their JSON spelling ("true", "false", "null").
    """
    if value is None or isinstance(value, bool):
        return json.dumps(value)
    if isinstance(value, (dict, list, tuple)):
        try:
            return json.dumps(value, default=str)
        except (TypeError, ValueError):
            return str(value)
    return str(value)


def next_timestamp(now_ns: int, last_ns: int) -> int:
    """Return a timestamp strictly greater than last_ns.

    Args:
        now_ns: Current wall-clock time in nanoseconds.
        last_ns: Last timestamp handed out by the same transport.

    Returns:
        now_ns, or last_ns + 1 when the clock has not advanced.
    """
    if now_ns <= last_ns:
        return last_ns + 1
    return now_ns


def build_log_record(
    level: LogLevel,
    message: str,
    attributes: Mapping[str, Any] | None,
    *,
    timestamp_ns: int,
    trace_id: str,
    span_id: str,
    parent_span_id: str | None,
    service_name: str,
    environment: str,
) -> LogRecord:
    """Build an immutable LogRecord.

    Args:
        level: Severity of the record.
        message: Formatted log message (context prefix already applied).
        attributes: Caller attributes, coerced to strings in insertion order.
        timestamp_ns: Timestamp assigned by the owning transport.
        trace_id: Root trace id of the owning transport.
        span_id: Span id of this record.
        parent_span_id: Root span id; None for the root span record itself.
        service_name: Value of the service.name attribute.
        environment: Value of the environment attribute.

    Returns:
        LogRecord with level, service.name, environment and (for non-root
        records) parent.id ahead of the caller attributes.
    """
    pairs: list[tuple[str, str]] = [
        ("level", level.value.lower()),
        ("service.name", service_name),
        ("environment", environment),
    ]
    if parent_span_id is not None:
        pairs.append(("parent.id", parent_span_id))
    if attributes:
        pairs.extend(
            (key, coerce_attribute_value(value)) for key, value in attributes.items()
        )

    return LogRecord(
        timestamp_ns=timestamp_ns,
        observed_timestamp_ns=timestamp_ns,
        severity_number=severity_number(level),
        severity_text=level.value,
        body=message,
        trace_id=trace_id,
        span_id=span_id,
        attributes=tuple(pairs),
    )
