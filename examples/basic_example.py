"""Basic usage of otel_http_logger.

Run with:
    python examples/basic_example.py

Set HYPERDX_API_KEY to also ship the logs to HyperDX; without it the
example logs to the console only.
"""

import asyncio
import os

from otel_http_logger import LoggerConfig, initialize_logger


async def main() -> None:
    api_key = os.environ.get("HYPERDX_API_KEY")
    logger = initialize_logger(
        LoggerConfig(
            endpoint="https://in-otel.hyperdx.io/v1/logs" if api_key else "",
            headers={"Authorization": api_key} if api_key else {},
            service_name="example-service",
            environment="development",
        )
    )

    logger.debug("This is a debug message")
    logger.info("Message with attributes", {"userId": "12345", "action": "login"})
    logger.warn("This is a warning message")

    try:
        raise RuntimeError("Something went wrong")
    except RuntimeError as exc:
        logger.error("An error occurred", exc, {"component": "authentication"})

    session = logger.new_context("auth").new_context("session")
    session.info("Session created")

    await logger.flush()


if __name__ == "__main__":
    asyncio.run(main())
