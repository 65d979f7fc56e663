"""
Record Clock

Assigns occurred_at values for new log records.
"""

import threading
from datetime import UTC, datetime, timedelta
from typing import Callable, Optional

OCCURRED_AT_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"


def format_occurred_at(moment: datetime) -> str:
    """Render a datetime as fixed-width UTC ISO-8601 with microseconds"""
    if moment.tzinfo is not None:
        moment = moment.astimezone(UTC).replace(tzinfo=None)
    return moment.strftime(OCCURRED_AT_FORMAT)


class RecordClock:
    """
    Wall-clock source of occurred_at strings.

    Values are strictly increasing within a process: if the wall clock has
    not moved past the last value handed out (same microsecond, or stepped
    backwards), the next value is the last one plus one microsecond.
    """

    def __init__(self, now: Optional[Callable[[], datetime]] = None):
        self._now = now or (lambda: datetime.now(UTC))
        self._last: Optional[datetime] = None
        self._lock = threading.Lock()

    def next(self) -> str:
        with self._lock:
            current = self._now()
            if self._last is not None and current <= self._last:
                current = self._last + timedelta(microseconds=1)
            self._last = current
            return format_occurred_at(current)


default_clock = RecordClock()
