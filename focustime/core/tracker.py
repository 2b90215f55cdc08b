"""Focus tracker for FocusTime.

Owns the shared tracking state and exposes the lifecycle used by the
poll loop and the reporting loop:

- ``init()`` / ``cleanup()`` reset the state
- ``update()`` runs one probe-and-accumulate step
- ``window_count()``, ``window_at()``, ``all_windows()`` read snapshots

Every operation holds a single lock over the whole state. The probe call
itself runs outside the lock so a slow windowing call never blocks readers.
"""

import logging
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Callable, Iterator, Optional

from focustime.core.accumulator import FocusAccumulator
from focustime.core.models import TrackerUnavailableError, WindowRecord
from focustime.platform.base import ActiveWindowProbe

logger = logging.getLogger(__name__)

# Default poll cadence in seconds (100ms).
_DEFAULT_POLL_INTERVAL = 0.1


def utc_now() -> datetime:
    """Return the current wall-clock time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class FocusTracker:
    """Attributes focus time to window titles reported by a probe.

    A single instance is created at startup and shared by reference
    between the poll loop (``run``) and the reporting loop.
    """

    def __init__(
        self,
        probe: ActiveWindowProbe,
        clock: Callable[[], datetime] = utc_now,
        poll_interval: float = _DEFAULT_POLL_INTERVAL,
    ) -> None:
        self.probe = probe
        self.poll_interval = poll_interval
        self._clock = clock
        self._lock = threading.Lock()
        start = self._read_clock()
        self._accumulator = FocusAccumulator(start if start is not None else utc_now())
        self._unavailable = False
        self._stop_event = threading.Event()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def init(self) -> None:
        """Discard all accumulated time and restart the interval at now.

        Also clears a previous "tracker unavailable" condition. Without a
        clock reading the interval restarts at the last transition time.
        """
        now = self._read_clock()
        with self._lock:
            if now is None:
                now = self._accumulator.last_transition_time
            self._accumulator.reset(now)
            self._unavailable = False
        logger.info("Tracker initialised")

    def cleanup(self) -> None:
        """Discard all buckets; the last transition time is kept."""
        with self._state(mutating=True) as acc:
            acc.clear()

    def update(self) -> Optional[str]:
        """Probe the active window once and credit the elapsed interval.

        Returns the observed title, or ``None`` when nothing was observed.
        """
        now = self._read_clock()

        try:
            title = self.probe.probe()
        except Exception:
            logger.exception("Active window probe failed; skipping this poll")
            return None

        if title is None:
            return None

        with self._state(mutating=True) as acc:
            # No usable clock reading: credit nothing for this interval.
            acc.observe(title, now if now is not None else acc.last_transition_time)
        return title

    # ------------------------------------------------------------------
    # Snapshot reads
    # ------------------------------------------------------------------

    def window_count(self) -> int:
        """Number of distinct titles recorded."""
        with self._state() as acc:
            return len(acc)

    def window_at(self, index: int) -> Optional[WindowRecord]:
        """Record at *index* in the current key set, or ``None``.

        Ordering follows first observation but callers should not rely on
        it staying stable across updates.
        """
        with self._state() as acc:
            return acc.record_at(index)

    def all_windows(self) -> list[WindowRecord]:
        """Copy of every record, safe to use after the lock is released."""
        with self._state() as acc:
            return acc.snapshot()

    @property
    def last_transition_time(self) -> datetime:
        """Moment the last interval was attributed (locked read)."""
        with self._state() as acc:
            return acc.last_transition_time

    # ------------------------------------------------------------------
    # Poll loop
    # ------------------------------------------------------------------

    @property
    def running(self) -> bool:
        """Whether the poll loop has not been asked to stop."""
        return not self._stop_event.is_set()

    def run(self) -> None:
        """Call ``update()`` every ``poll_interval`` seconds until ``stop()``."""
        logger.info("Polling active window every %.3fs", self.poll_interval)
        while not self._stop_event.is_set():
            try:
                self.update()
            except TrackerUnavailableError:
                logger.debug("Tracker unavailable; poll skipped")
            except Exception:
                logger.exception("Unexpected error during poll")
            self._stop_event.wait(self.poll_interval)
        logger.info("Poll loop stopped")

    def stop(self) -> None:
        """Signal the poll loop to stop, waking it if it is sleeping."""
        self._stop_event.set()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @contextmanager
    def _state(self, mutating: bool = False) -> Iterator[FocusAccumulator]:
        """Hold the lock and yield the accumulator.

        An exception escaping a mutation marks the tracker unavailable
        until the next ``init()``.
        """
        with self._lock:
            if self._unavailable:
                raise TrackerUnavailableError(
                    "Tracker state is unavailable; call init() to restart"
                )
            try:
                yield self._accumulator
            except Exception:
                if mutating:
                    self._unavailable = True
                    logger.error("Tracker state update failed; marking tracker unavailable")
                raise

    def _read_clock(self) -> Optional[datetime]:
        try:
            return self._clock()
        except Exception:
            logger.warning("Clock unavailable; crediting zero time", exc_info=True)
            return None
