"""Logger facade with optional OTLP/HTTP delivery.

A Logger always writes to the console. When built with an OtelConfig it also
queues OTLP records on a backend that is shared with every context logger
derived from it via new_context().
"""

import inspect
import traceback
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, Protocol, TypeVar, runtime_checkable

from otel_http_logger import console
from otel_http_logger.adapters.transport.otlp_http import OtelBackend
from otel_http_logger.core.context import use_logger
from otel_http_logger.core.models import LogLevel, OtelConfig
from otel_http_logger.core.ports import LogTransportPort

T = TypeVar("T")

CONSOLE_SERVICE_NAME = "console-logger"
CONSOLE_ENVIRONMENT = "development"


@runtime_checkable
class ContextLogger(Protocol):
    """Interface shared by root and context loggers."""

    def debug(self, message: str, attributes: Mapping[str, Any] | None = None) -> None: ...
    def info(self, message: str, attributes: Mapping[str, Any] | None = None) -> None: ...
    def warn(self, message: str, attributes: Mapping[str, Any] | None = None) -> None: ...
    def error(
        self,
        message: str,
        error: BaseException | None = None,
        attributes: Mapping[str, Any] | None = None,
    ) -> None: ...
    def new_context(self, context: str) -> "ContextLogger": ...


def error_attributes(error: BaseException) -> dict[str, str]:
    """Describe an exception as errorName/errorMessage/errorStack attributes."""
    return {
        "errorName": type(error).__name__,
        "errorMessage": str(error),
        "errorStack": "".join(
            traceback.format_exception(type(error), error, error.__traceback__)
        ),
    }


class Logger:
    """Contextual logger with an optional shared OTLP backend.

    Example:
        ```python
        logger = Logger(OtelConfig(
            endpoint="https://collector.example.com/v1/logs",
            service_name="billing",
            environment="staging",
            headers={"Authorization": "token"},
        ))

        async def main() -> None:
            create_logger("jobs").info("started", {"job_id": 7})

        await logger.with_logger(main)
        ```

    Args:
        config: Transport configuration. None gives a console-only logger.
        context_prefix: Context path prepended to messages as ``[prefix]``.
        **backend_options: Passed to OtelBackend (max_retries, retry_delay,
            timeout, transport, clock, emit_root_span_record).
    """

    def __init__(
        self,
        config: OtelConfig | None = None,
        context_prefix: str = "",
        *,
        _parent: "Logger | None" = None,
        **backend_options: Any,
    ) -> None:
        self._context_prefix = context_prefix
        self._backend: LogTransportPort | None = None

        if _parent is not None:
            # Context loggers share the parent backend and never announce.
            self._backend = _parent._backend
            self.service_name = _parent.service_name
            self.environment = _parent.environment
        elif config is not None:
            backend = OtelBackend(config, **backend_options)
            self._backend = backend
            self.service_name = config.service_name
            self.environment = config.environment
            if not context_prefix:
                console.console_logger.info(
                    "[%s] Logger initialized (trace: %s...)",
                    self.service_name,
                    backend.get_trace_id()[:8],
                )
        else:
            self.service_name = CONSOLE_SERVICE_NAME
            self.environment = CONSOLE_ENVIRONMENT
            if not context_prefix:
                console.console_logger.info(
                    "[%s] Console-only logger initialized (OTEL logging disabled)",
                    self.service_name,
                )

    @property
    def backend(self) -> LogTransportPort | None:
        """The shared transport, or None for console-only loggers."""
        return self._backend

    @property
    def context_prefix(self) -> str:
        return self._context_prefix

    def _format_message(self, message: str) -> str:
        if self._context_prefix:
            return f"[{self._context_prefix}] {message}"
        return message

    def _log(
        self, level: LogLevel, message: str, attributes: Mapping[str, Any] | None
    ) -> None:
        formatted = self._format_message(message)
        if self._backend is not None:
            self._backend.create_log_record(level, formatted, attributes)
        console.write(self.service_name, level, formatted, attributes)

    def debug(self, message: str, attributes: Mapping[str, Any] | None = None) -> None:
        """Log a debug message."""
        self._log(LogLevel.DEBUG, message, attributes)

    def info(self, message: str, attributes: Mapping[str, Any] | None = None) -> None:
        """Log an info message."""
        self._log(LogLevel.INFO, message, attributes)

    def warn(self, message: str, attributes: Mapping[str, Any] | None = None) -> None:
        """Log a warning message."""
        self._log(LogLevel.WARN, message, attributes)

    def error(
        self,
        message: str,
        error: BaseException | None = None,
        attributes: Mapping[str, Any] | None = None,
    ) -> None:
        """Log an error message.

        Args:
            message: The message to log.
            error: Optional exception; adds errorName, errorMessage and
                errorStack attributes to the record.
            attributes: Optional attributes to include with the log.
        """
        formatted = self._format_message(message)
        if self._backend is not None:
            merged: dict[str, Any] = dict(attributes or {})
            if error is not None:
                merged.update(error_attributes(error))
            self._backend.create_log_record(LogLevel.ERROR, formatted, merged)
        console.write(self.service_name, LogLevel.ERROR, formatted, error, attributes)

    def new_context(self, context: str) -> "Logger":
        """Create a logger that prefixes messages with an extended context path.

        The returned logger shares this logger's backend, trace and span ids.

        Args:
            context: Name appended to the context path with ``:``.

        Returns:
            A new Logger for the nested context.
        """
        prefix = f"{self._context_prefix}:{context}" if self._context_prefix else context
        return Logger(context_prefix=prefix, _parent=self)

    async def flush(self) -> bool:
        """Send all queued logs. No-op for console-only loggers.

        Returns:
            False only when the backend abandoned delivery.
        """
        if self._backend is None:
            return True
        return await self._backend.flush()

    async def with_logger(self, fn: Callable[[], T | Awaitable[T]]) -> T:
        """Run fn with this logger as the current logger, then flush.

        fn may be a plain callable or return an awaitable. Logs are flushed
        exactly once whether fn returns or raises; on failure the exception
        is logged first and then re-raised unchanged.

        Args:
            fn: Zero-argument callable to run inside the logger scope.

        Returns:
            The result of fn.
        """
        try:
            with use_logger(self):
                result = fn()
                if inspect.isawaitable(result):
                    result = await result
        except BaseException as exc:
            self.error("withLogger error - flushing", exc)
            await self.flush()
            raise
        await self.flush()
        return result  # type: ignore[return-value]
