"""
Utility helpers shared across services: identifier generation and the
logical clock used for created_at/updated_at bookkeeping.
"""

from __future__ import annotations

import threading
import time
import uuid


def new_id() -> str:
    """Return a random UUID4 string for a new record."""
    return str(uuid.uuid4())


class MonotonicClock:
    """Wall-clock nanoseconds that never go backwards within a process."""

    def __init__(self) -> None:
        self._last = 0
        self._lock = threading.Lock()

    def now(self) -> int:
        with self._lock:
            self._last = max(time.time_ns(), self._last)
            return self._last
