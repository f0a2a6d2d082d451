"""Ticket ID recognition and generation."""

import re
import time
from collections.abc import Collection
from datetime import datetime, timezone

ID_PREFIX = "ticket-"

_ID_RE = re.compile(r"^ticket-\S+$")


def is_ticket_id(value) -> bool:
    """Check whether value has the ``ticket-...`` shape."""
    return isinstance(value, str) and bool(_ID_RE.match(value))


def generate_id(taken: Collection[str] = (), now_ms: int | None = None) -> str:
    """Generate a time-based ticket ID not present in taken.

    Uses epoch milliseconds; if that ID is already taken the number is
    bumped until it is free, so IDs minted within the same millisecond
    stay distinct.

    generate_id(now_ms=5) → "ticket-5"
    generate_id({"ticket-5"}, now_ms=5) → "ticket-6"
    """
    n = int(time.time() * 1000) if now_ms is None else now_ms
    while f"{ID_PREFIX}{n}" in taken:
        n += 1
    return f"{ID_PREFIX}{n}"


def utc_now() -> str:
    """Current UTC time as ISO-8601 text with millisecond precision.

    Matches the ``2024-01-01T00:00:00.000Z`` form other board editors write.
    """
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
