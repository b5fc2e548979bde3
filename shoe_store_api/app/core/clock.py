"""Identifier and timestamp sources for new and updated records."""

import time
import uuid
from typing import Callable


def generate_id() -> str:
    """Return a random UUID4 string used as a record key."""
    return str(uuid.uuid4())


class MonotonicClock:
    """Wall clock in nanoseconds that never goes backwards.

    If the system clock steps back, the last returned value is
    repeated until real time catches up.
    """

    def __init__(self, time_source: Callable[[], int] = time.time_ns) -> None:
        self._time_source = time_source
        self._last = 0

    def now(self) -> int:
        current = self._time_source()
        if current < self._last:
            current = self._last
        self._last = current
        return current


clock = MonotonicClock()
