"""Logger configuration and convenience constructors."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from otel_http_logger.core.models import OtelConfig
from otel_http_logger.logger import Logger

DEFAULT_ENDPOINT = "https://in-otel.hyperdx.io/v1/logs"
DEFAULT_ENVIRONMENT = "production"
API_KEY_ENV_VAR = "HYPERDX_API_KEY"


def parse_headers(raw: str) -> dict[str, str]:
    """Parse an OTEL_EXPORTER_OTLP_HEADERS style ``k=v,k2=v2`` string.

    Entries without ``=`` are ignored; keys and values are stripped.
    """
    headers: dict[str, str] = {}
    for item in raw.split(","):
        key, sep, value = item.partition("=")
        if sep and key.strip():
            headers[key.strip()] = value.strip()
    return headers


@dataclass(frozen=True)
class LoggerConfig(OtelConfig):
    """Logger configuration (same fields as OtelConfig)."""

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "LoggerConfig":
        """Build a config from the standard OTEL environment variables.

        Reads OTEL_EXPORTER_OTLP_LOGS_ENDPOINT, OTEL_EXPORTER_OTLP_HEADERS,
        OTEL_SERVICE_NAME and DEPLOYMENT_ENVIRONMENT. A missing endpoint
        gives an empty endpoint, which disables delivery.
        """
        env = os.environ if environ is None else environ
        return cls(
            endpoint=env.get("OTEL_EXPORTER_OTLP_LOGS_ENDPOINT", ""),
            headers=parse_headers(env.get("OTEL_EXPORTER_OTLP_HEADERS", "")),
            service_name=env.get("OTEL_SERVICE_NAME", "unknown_service"),
            environment=env.get("DEPLOYMENT_ENVIRONMENT", DEFAULT_ENVIRONMENT),
        )


def default_config(service_name: str) -> LoggerConfig:
    """Config for the default HyperDX collector.

    The Authorization header comes from HYPERDX_API_KEY and is omitted when
    the variable is unset.
    """
    headers = {}
    api_key = os.environ.get(API_KEY_ENV_VAR)
    if api_key:
        headers["Authorization"] = api_key
    return LoggerConfig(
        endpoint=DEFAULT_ENDPOINT,
        headers=headers,
        service_name=service_name,
        environment=DEFAULT_ENVIRONMENT,
    )


def initialize_logger(config: OtelConfig | str, **backend_options: Any) -> Logger:
    """Create a root logger.

    Args:
        config: Full configuration, or a service name for the default
            HyperDX configuration.
        **backend_options: Passed through to OtelBackend.

    Returns:
        The initialized root Logger.

    Raises:
        TypeError: If config is neither an OtelConfig nor a str.
    """
    if isinstance(config, str):
        return Logger(default_config(config), **backend_options)
    if isinstance(config, OtelConfig):
        return Logger(config, **backend_options)
    raise TypeError(
        f"config must be an OtelConfig or a service name, got {type(config).__name__}"
    )
