"""Exception types raised by otel_http_logger."""


class OtelHttpLoggerError(Exception):
    """Base class for otel_http_logger errors."""
