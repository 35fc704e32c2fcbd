"""otel_http_logger - structured logging with optional OTLP/HTTP delivery.

Loggers always write to the console and, when configured with a collector
endpoint, batch OTLP log records and ship them over HTTP with retry.
"""

from otel_http_logger.adapters.logging import OtelHttpLoggerHandler
from otel_http_logger.adapters.logging_context import (
    create_logger,
    get_current_logger,
    reset_context_warning,
)
from otel_http_logger.adapters.transport.otlp_http import DeliveryError, OtelBackend
from otel_http_logger.config import LoggerConfig, initialize_logger
from otel_http_logger.core.context import use_logger
from otel_http_logger.core.errors import OtelHttpLoggerError
from otel_http_logger.core.ids import (
    generate_random_hex_string,
    generate_span_id,
    generate_trace_id,
)
from otel_http_logger.core.models import LogLevel, LogRecord, OtelConfig
from otel_http_logger.core.ports import LogTransportPort
from otel_http_logger.logger import ContextLogger, Logger

__all__ = [
    "ContextLogger",
    "DeliveryError",
    "LogLevel",
    "LogRecord",
    "LogTransportPort",
    "Logger",
    "LoggerConfig",
    "OtelBackend",
    "OtelConfig",
    "OtelHttpLoggerError",
    "OtelHttpLoggerHandler",
    "create_logger",
    "generate_random_hex_string",
    "generate_span_id",
    "generate_trace_id",
    "get_current_logger",
    "initialize_logger",
    "reset_context_warning",
    "use_logger",
]
