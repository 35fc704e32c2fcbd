"""Context propagation across async request handling.

Run with:
    python examples/context_example.py

Each simulated request runs inside ``with_logger()``, so handlers obtain a
logger with ``create_logger()`` instead of receiving one as a parameter.
"""

import asyncio
from typing import Any

from otel_http_logger import LoggerConfig, create_logger, initialize_logger

logger = initialize_logger(LoggerConfig.from_env())


async def auth_middleware() -> None:
    log = create_logger("middleware:auth")
    log.debug("Authenticating request")
    await asyncio.sleep(0.05)
    log.debug("Authentication successful")


async def get_users() -> list[dict[str, Any]]:
    log = create_logger("handler:getUsers")
    log.info("Fetching users")
    await asyncio.sleep(0.1)
    users = [{"id": 1, "name": "Alice"}, {"id": 2, "name": "Bob"}]
    log.info("Users fetched successfully", {"count": len(users)})
    return users


async def handle_request(method: str, path: str) -> list[dict[str, Any]]:
    async def run() -> list[dict[str, Any]]:
        request_log = create_logger("request")
        request_log.info(f"{method} {path}", {"method": method, "path": path})
        await auth_middleware()
        if (method, path) != ("GET", "/users"):
            raise LookupError(f"Route not found: {method} {path}")
        return await get_users()

    return await logger.with_logger(run)


async def main() -> None:
    print(await handle_request("GET", "/users"))
    try:
        await handle_request("GET", "/invalid")
    except LookupError as exc:
        print(f"Error caught: {exc}")


if __name__ == "__main__":
    asyncio.run(main())
