"""Console reporting loop for FocusTime.

Prints a status block for the shared FocusTracker on a fixed cadence.
"""

import logging
import sys
import threading
from typing import Optional, TextIO

from focustime.core.models import TrackerUnavailableError
from focustime.core.tracker import FocusTracker
from focustime.reporting.formatter import TextFormatter

logger = logging.getLogger(__name__)

# Default report cadence in seconds.
_DEFAULT_DISPLAY_INTERVAL = 1.0


class ConsoleReporter:
    """Periodically renders tracker snapshots to a text stream."""

    def __init__(
        self,
        tracker: FocusTracker,
        display_interval: float = _DEFAULT_DISPLAY_INTERVAL,
        stream: Optional[TextIO] = None,
    ) -> None:
        self.tracker = tracker
        self.display_interval = display_interval
        self.stream = stream if stream is not None else sys.stdout
        self._stop_event = threading.Event()

    def report_once(self) -> bool:
        """Print one status block.

        Returns ``False`` when the tracker was unavailable; in that case
        the tracker is restarted with ``init()`` and nothing is printed.
        """
        try:
            count = self.tracker.window_count()
            windows = self.tracker.all_windows()
        except TrackerUnavailableError:
            logger.error("Tracker unavailable; restarting tracking from zero")
            self.tracker.init()
            return False

        print(TextFormatter.format_status(count, windows), file=self.stream, flush=True)
        return True

    def run(self) -> None:
        """Report every ``display_interval`` seconds until ``stop()``."""
        while not self._stop_event.wait(self.display_interval):
            self.report_once()

    def stop(self) -> None:
        """Signal the reporting loop to stop."""
        self._stop_event.set()
