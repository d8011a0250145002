"""Time-based id generation for products and orders."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime


def next_id(existing_ids: Iterable[str], now: datetime) -> str:
    """Return the epoch-millisecond timestamp of *now* as a string.

    If that would not be greater than every numeric id already in use
    (two ids in the same millisecond, or a clock that went backwards),
    the largest existing id plus one is used instead.
    """
    candidate = int(now.timestamp() * 1000)
    numeric = [int(i) for i in existing_ids if i.isdigit()]
    if numeric and candidate <= max(numeric):
        candidate = max(numeric) + 1
    return str(candidate)
