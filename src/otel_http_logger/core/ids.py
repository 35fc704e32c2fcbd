"""Random hex identifiers for trace and span correlation."""

import random
import secrets

TRACE_ID_LENGTH = 32
SPAN_ID_LENGTH = 16


def _random_bytes(count: int) -> bytes:
    try:
        return secrets.token_bytes(count)
    except NotImplementedError:
        # No OS randomness source (constrained runtimes).
        return random.randbytes(count)


def generate_random_hex_string(length: int) -> str:
    """Generate a lowercase hex string of exactly ``length`` characters.

    Args:
        length: Number of hex characters to return.

    Returns:
        Hex string drawn from ceil(length / 2) random bytes.
    """
    return _random_bytes((length + 1) // 2).hex()[:length]


def generate_trace_id() -> str:
    """Generate a trace ID (16 bytes / 32 hex chars)."""
    return generate_random_hex_string(TRACE_ID_LENGTH)


def generate_span_id() -> str:
    """Generate a span ID (8 bytes / 16 hex chars)."""
    return generate_random_hex_string(SPAN_ID_LENGTH)
