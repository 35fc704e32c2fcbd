"""Tests for the OTLP JSON encoder."""

import json

import pytest

from otel_http_logger.core.encoding.otlp import (
    encode_json,
    encode_log_record,
    encode_payload,
)
from otel_http_logger.core.models import LogRecord

pytestmark = [pytest.mark.core, pytest.mark.tier(0)]

RECORD = LogRecord(
    timestamp_ns=1_700_000_000_123_456_789,
    observed_timestamp_ns=1_700_000_000_123_456_789,
    severity_number=17,
    severity_text="ERROR",
    body="boom",
    trace_id="0" * 32,
    span_id="1" * 16,
    attributes=(("level", "error"), ("order", '{"id": 1}')),
)


class TestEncodeLogRecord:
    """Tests for encode_log_record()."""

    @pytest.mark.tra("Core.Encoding.Otlp.Record")
    def test_encodes_record_in_otlp_shape(self) -> None:
        """Record fields map onto OTLP camelCase keys."""
        assert encode_log_record(RECORD) == {
            "timestamp": "1700000000123456789",
            "observedTimestamp": "1700000000123456789",
            "severityNumber": 17,
            "severityText": "ERROR",
            "body": {"stringValue": "boom"},
            "traceId": "0" * 32,
            "spanId": "1" * 16,
            "attributes": [
                {"key": "level", "value": {"stringValue": "error"}},
                {"key": "order", "value": {"stringValue": '{"id": 1}'}},
            ],
        }

    @pytest.mark.tra("Core.Encoding.Otlp.TimestampStrings")
    def test_timestamps_are_decimal_strings(self) -> None:
        """Nanosecond timestamps survive JSON without float rounding."""
        decoded = json.loads(encode_json([RECORD], "svc", "test"))
        record = decoded["resourceLogs"][0]["scopeLogs"][0]["logRecords"][0]
        assert record["timestamp"] == "1700000000123456789"


class TestEncodePayload:
    """Tests for encode_payload()."""

    @pytest.mark.tra("Core.Encoding.Otlp.Resource")
    def test_resource_attributes(self) -> None:
        """The envelope carries service.name and deployment.environment."""
        payload = encode_payload([RECORD], "svc", "staging")
        resource = payload["resourceLogs"][0]["resource"]
        assert resource["attributes"] == [
            {"key": "service.name", "value": {"stringValue": "svc"}},
            {"key": "deployment.environment", "value": {"stringValue": "staging"}},
        ]

    @pytest.mark.tra("Core.Encoding.Otlp.Order")
    def test_records_keep_order(self) -> None:
        """Records are emitted in the order given."""
        second = LogRecord(2, 2, 9, "INFO", "second", "0" * 32, "2" * 16)
        payload = encode_payload([RECORD, second], "svc", "test")
        bodies = [
            r["body"]["stringValue"]
            for r in payload["resourceLogs"][0]["scopeLogs"][0]["logRecords"]
        ]
        assert bodies == ["boom", "second"]
