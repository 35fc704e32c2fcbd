"""Shared test fixtures for all test modules."""

import json
import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest

from otel_http_logger.adapters.logging_context import reset_context_warning
from otel_http_logger.console import CONSOLE_LOGGER_NAME
from otel_http_logger.core.models import OtelConfig

TEST_ENDPOINT = "https://test.endpoint/v1/logs"


@dataclass
class CollectorStub:
    """Records every request made to a fake OTLP collector.

    Attributes:
        statuses: Status codes to answer with, in order. The last one repeats.
        requests: Requests received so far.
        error: Optional exception raised instead of answering.
    """

    statuses: list[int] = field(default_factory=lambda: [200])
    requests: list[httpx.Request] = field(default_factory=list)
    error: Exception | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        index = min(len(self.requests) - 1, len(self.statuses) - 1)
        return httpx.Response(self.statuses[index])

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def payload(self, index: int = -1) -> dict[str, Any]:
        """Decoded JSON body of a received request."""
        return json.loads(self.requests[index].content)

    def log_records(self, index: int = -1) -> list[dict[str, Any]]:
        """OTLP log records of a received request."""
        return self.payload(index)["resourceLogs"][0]["scopeLogs"][0]["logRecords"]


@pytest.fixture
def fresh_context_warning() -> Iterator[None]:
    """Re-arm the one-time missing-context warning around a test."""
    reset_context_warning()
    yield
    reset_context_warning()


@pytest.fixture
def otel_config() -> OtelConfig:
    """Config pointing at the fake collector endpoint."""
    return OtelConfig(
        endpoint=TEST_ENDPOINT,
        headers={"Authorization": "test-token"},
        service_name="test-service",
        environment="test",
    )


@pytest.fixture
def collector() -> CollectorStub:
    """Fake collector answering 200 unless reconfigured."""
    return CollectorStub()


@pytest.fixture
def backend_options(collector: CollectorStub) -> dict[str, Any]:
    """OtelBackend options wiring the fake collector without backoff delays."""
    return {"transport": collector.transport, "retry_delay": 0}


@pytest.fixture
def console_capture(caplog: pytest.LogCaptureFixture) -> Iterator[pytest.LogCaptureFixture]:
    """Capture console lines (the console logger does not propagate)."""
    console = logging.getLogger(CONSOLE_LOGGER_NAME)
    console.addHandler(caplog.handler)
    caplog.set_level(logging.DEBUG, logger=CONSOLE_LOGGER_NAME)
    try:
        yield caplog
    finally:
        console.removeHandler(caplog.handler)


@pytest.fixture
def fixed_clock() -> Callable[[], int]:
    """Clock that never advances, to exercise timestamp bumping."""
    return lambda: 1_700_000_000_000_000_000
