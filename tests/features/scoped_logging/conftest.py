"""BDD step definitions for scoped logging features."""

import asyncio
from dataclasses import dataclass, field
from typing import Any

import pytest
from pytest_bdd import given, parsers, then, when

from otel_http_logger.adapters.logging_context import create_logger
from otel_http_logger.core.models import OtelConfig
from otel_http_logger.logger import Logger


@dataclass
class ScopedLoggingContext:
    """State shared between steps of one scenario."""

    collector: Any = None
    logger: Logger | None = None
    failure: BaseException | None = None
    extra: dict[str, Any] = field(default_factory=dict)


@pytest.fixture
def ctx() -> ScopedLoggingContext:
    """Fresh scenario context for each test."""
    return ScopedLoggingContext()


def _records(ctx: ScopedLoggingContext) -> list[dict[str, Any]]:
    return ctx.collector.log_records()


# === Background Steps ===
@given("a collector that answers 200")
def step_collector(ctx: ScopedLoggingContext, collector) -> None:
    ctx.collector = collector


@given(parsers.parse('a root logger for service "{service}"'))
def step_root_logger(ctx: ScopedLoggingContext, service: str) -> None:
    config = OtelConfig(
        endpoint="https://collector.test/v1/logs",
        service_name=service,
        environment="test",
    )
    ctx.logger = Logger(config, transport=ctx.collector.transport, retry_delay=0)


@given(parsers.parse("the collector answers {status:d}"))
def step_collector_status(ctx: ScopedLoggingContext, status: int) -> None:
    ctx.collector.statuses = [status]


# === Scope Steps ===
@when(parsers.parse('the scope logs "{message}" through context "{path}"'))
def step_scope_logs(ctx: ScopedLoggingContext, message: str, path: str) -> None:
    async def work() -> None:
        names = path.split(":")
        log = create_logger(names[0])
        for name in names[1:]:
            log = log.new_context(name)
        log.info(message)

    asyncio.run(ctx.logger.with_logger(work))


@when(parsers.parse('the scope raises "{message}"'))
def step_scope_raises(ctx: ScopedLoggingContext, message: str) -> None:
    async def work() -> None:
        raise RuntimeError(message)

    try:
        asyncio.run(ctx.logger.with_logger(work))
    except RuntimeError as exc:
        ctx.failure = exc


# === Assertions ===
@then(parsers.parse('the scope failed with "{message}"'))
def step_scope_failed(ctx: ScopedLoggingContext, message: str) -> None:
    assert isinstance(ctx.failure, RuntimeError)
    assert str(ctx.failure) == message


@then(parsers.re(r"the collector received (?P<count>\d+) requests?"))
def step_request_count(ctx: ScopedLoggingContext, count: str) -> None:
    assert len(ctx.collector.requests) == int(count)


@then("the delivered bodies are:")
def step_delivered_bodies(
    ctx: ScopedLoggingContext, datatable: list[list[str]]
) -> None:
    expected = [row[0].strip() for row in datatable[1:]]
    assert [r["body"]["stringValue"] for r in _records(ctx)] == expected


@then(parsers.parse('the last delivered record has attribute "{key}" = "{value}"'))
def step_last_record_attribute(ctx: ScopedLoggingContext, key: str, value: str) -> None:
    attributes = {
        a["key"]: a["value"]["stringValue"] for a in _records(ctx)[-1]["attributes"]
    }
    assert attributes[key] == value


@then(parsers.re(r"(?P<count>\d+) records? (is|are) still queued"))
def step_still_queued(ctx: ScopedLoggingContext, count: str) -> None:
    assert len(ctx.logger.backend.pending) == int(count)
