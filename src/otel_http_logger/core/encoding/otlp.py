"""OTLP/HTTP JSON encoder for log records."""

import json
from collections.abc import Iterable
from typing import Any

from otel_http_logger.core.models import LogRecord


def _string_attribute(key: str, value: str) -> dict[str, Any]:
    return {"key": key, "value": {"stringValue": value}}


def encode_log_record(record: LogRecord) -> dict[str, Any]:
    """Encode a single LogRecord as an OTLP JSON log record.

    Timestamps are emitted as decimal strings to avoid precision loss
    in JSON number parsers.
    """
    return {
        "timestamp": str(record.timestamp_ns),
        "observedTimestamp": str(record.observed_timestamp_ns),
        "severityNumber": record.severity_number,
        "severityText": record.severity_text,
        "body": {"stringValue": record.body},
        "traceId": record.trace_id,
        "spanId": record.span_id,
        "attributes": [_string_attribute(k, v) for k, v in record.attributes],
    }


def encode_payload(
    records: Iterable[LogRecord], service_name: str, environment: str
) -> dict[str, Any]:
    """Wrap log records in the OTLP resourceLogs envelope.

    Args:
        records: Records to include, in delivery order.
        service_name: Reported as the service.name resource attribute.
        environment: Reported as the deployment.environment resource attribute.

    Returns:
        Dict ready for JSON serialization.
    """
    return {
        "resourceLogs": [
            {
                "resource": {
                    "attributes": [
                        _string_attribute("service.name", service_name),
                        _string_attribute("deployment.environment", environment),
                    ]
                },
                "scopeLogs": [
                    {"logRecords": [encode_log_record(r) for r in records]},
                ],
            }
        ]
    }


def encode_json(
    records: Iterable[LogRecord], service_name: str, environment: str
) -> str:
    """Encode records into the OTLP envelope as a JSON string."""
    return json.dumps(encode_payload(records, service_name, environment))
