"""Utility functions: note id generation."""

import time
from collections.abc import Collection


def now_ms() -> int:
    """Return the current time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def generate_note_id(taken: Collection[str] = (), clock=now_ms) -> str:
    """Return a creation-time id (milliseconds) not present in *taken*.

    Two notes created within the same millisecond get consecutive ids.
    """
    candidate = clock()
    while str(candidate) in taken:
        candidate += 1
    return str(candidate)
