"""Transport adapters implementing LogTransportPort."""

from otel_http_logger.adapters.transport.otlp_http import DeliveryError, OtelBackend

__all__ = [
    "DeliveryError",
    "OtelBackend",
]
