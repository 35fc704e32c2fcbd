"""Core domain models for OTLP log records."""

from dataclasses import dataclass, field
from enum import Enum


class LogLevel(str, Enum):
    """Log levels for OTLP severity mapping."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


_SEVERITY_NUMBERS = {
    LogLevel.DEBUG: 5,
    LogLevel.INFO: 9,
    LogLevel.WARN: 13,
    LogLevel.ERROR: 17,
}


def severity_number(level: LogLevel) -> int:
    """Map a log level to its OTLP severity number.

    Unrecognized values map to INFO (9).
    """
    return _SEVERITY_NUMBERS.get(level, 9)


@dataclass(frozen=True)
class OtelConfig:
    """Configuration for an OTLP HTTP transport.

    Attributes:
        endpoint: OTLP HTTP collector URL. Empty string disables delivery.
        headers: Extra request headers, e.g. an authorization token.
        service_name: Service name reported as a resource attribute.
        environment: Deployment environment (e.g. production, staging).
    """

    endpoint: str
    service_name: str
    environment: str
    headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class LogRecord:
    """A wire-shaped OTLP log record.

    Attributes:
        timestamp_ns: Event time in nanoseconds since the epoch.
        observed_timestamp_ns: Observation time in nanoseconds since the epoch.
        severity_number: OTLP severity number (see severity_number()).
        severity_text: Level name, e.g. "INFO".
        body: The formatted log message.
        trace_id: 32-char hex trace id of the owning transport.
        span_id: 16-char hex span id of this record.
        attributes: Ordered (key, string value) pairs.
    """

    timestamp_ns: int
    observed_timestamp_ns: int
    severity_number: int
    severity_text: str
    body: str
    trace_id: str
    span_id: str
    attributes: tuple[tuple[str, str], ...] = ()

    def attribute(self, key: str) -> str | None:
        """Return the value of the first attribute named key, or None."""
        for name, value in self.attributes:
            if name == key:
                return value
        return None
