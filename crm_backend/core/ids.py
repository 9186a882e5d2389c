"""Opaque identifiers derived from the clock and a random suffix."""

import secrets
import string
import time

_ALPHABET = string.digits + string.ascii_lowercase


def generate_id(prefix: str, random_length: int = 9) -> str:
    """Return e.g. ``user_1718035200123_k3j9x0a1b``."""
    suffix = "".join(secrets.choice(_ALPHABET) for _ in range(random_length))
    return f"{prefix}_{time.time_ns() // 1_000_000}_{suffix}"
