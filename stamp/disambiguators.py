"""
Disambiguator sources.

A disambiguator supplies the number that keeps two identifiers created at
the same moment apart: the six-digit suffix of Fleeting and Voice notes, or
the running number of Analog and Project notes.

Sources are passed into stamp.generator.generate() explicitly. There is no
process-wide counter; a caller that wants uniqueness across several calls
keeps one source instance and reuses it. The stateful sources below guard
their state with a lock and may be shared between threads.
"""

import threading
from datetime import date, datetime
from typing import Dict, Optional


def clock_value(now: datetime) -> int:
    """Time of day as the integer HHMMSS."""
    return now.hour * 10000 + now.minute * 100 + now.second


class ClockSuffix:
    """Stateless source: the HHMMSS of the timestamp itself."""

    def next_value(self, now: datetime) -> int:
        return clock_value(now)


class MonotonicClockSuffix:
    """
    HHMMSS of the timestamp, bumped past anything already issued today.

    The first note of a second gets its own HHMMSS. A second request in the
    same second (or a request whose clock went backwards) gets the last
    issued value plus one, so values handed out for one calendar day are
    strictly increasing and never repeat. Each day keeps its own high-water
    mark, so revisiting an earlier day (another timezone, a clock stepping
    back over midnight) cannot reissue a suffix.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._last: Dict[date, int] = {}

    def next_value(self, now: datetime) -> int:
        day = now.date()
        candidate = clock_value(now)
        with self._lock:
            last = self._last.get(day)
            if last is not None and candidate <= last:
                candidate = last + 1
            self._last[day] = candidate
        return candidate


class SequenceCounter:
    """Thread-safe running number: start, start + 1, ..."""

    def __init__(self, start: int = 1) -> None:
        self._lock = threading.Lock()
        self._next = start

    def next_value(self, now: Optional[datetime] = None) -> int:
        with self._lock:
            value = self._next
            self._next += 1
        return value

    def peek(self) -> int:
        """Return the value the next call would hand out, without consuming it."""
        with self._lock:
            return self._next
