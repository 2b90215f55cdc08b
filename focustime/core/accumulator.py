"""Focus-time accumulation for FocusTime.

Attributes elapsed wall-clock time to window titles. Every observation
credits the interval since the previous observation to the title seen
*now*, i.e. at the end of the interval. At a window switch the interval
since the last poll therefore goes to the new window. With a poll cadence
much shorter than typical dwell time the difference is negligible.

The accumulator is not thread-safe on its own; FocusTracker serialises
access to it.
"""

from datetime import datetime
from typing import Optional

from focustime.core.models import WindowRecord


class FocusAccumulator:
    """Maps window titles to accumulated focus seconds."""

    def __init__(self, now: datetime) -> None:
        self._records: dict[str, float] = {}
        self._last_transition_time = now

    @property
    def last_transition_time(self) -> datetime:
        """Moment the accumulator last attributed an interval."""
        return self._last_transition_time

    def observe(self, title: str, now: datetime) -> float:
        """Credit the interval ending at *now* to *title*.

        Returns the number of seconds credited. Negative intervals (the
        clock stepped backwards) are credited as zero, and the transition
        time never moves backwards.
        """
        elapsed = (now - self._last_transition_time).total_seconds()
        if elapsed < 0:
            elapsed = 0.0

        self._records[title] = self._records.get(title, 0.0) + elapsed

        if now > self._last_transition_time:
            self._last_transition_time = now
        return elapsed

    def reset(self, now: datetime) -> None:
        """Discard all buckets and start a new interval at *now*."""
        self._records.clear()
        self._last_transition_time = now

    def clear(self) -> None:
        """Discard all buckets, keeping the current transition time."""
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)

    def record_at(self, index: int) -> Optional[WindowRecord]:
        """Return the record at *index* in insertion order, or ``None``."""
        if index < 0 or index >= len(self._records):
            return None
        for position, (title, seconds) in enumerate(self._records.items()):
            if position == index:
                return WindowRecord(title=title, seconds=seconds)
        return None

    def snapshot(self) -> list[WindowRecord]:
        """Return a copy of every bucket."""
        return [
            WindowRecord(title=title, seconds=seconds)
            for title, seconds in self._records.items()
        ]