"""Core data models for FocusTime.

Defines the value types shared across the application:
- Tracking: WindowRecord
- Errors: FocusTimeError, TrackerUnavailableError
"""

from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Tracking
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class WindowRecord:
    """Accumulated focus time for a single window title."""
    title: str      # window identity; windows sharing a title share a bucket
    seconds: float  # total focus seconds credited to this title


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class FocusTimeError(Exception):
    """Base class for FocusTime errors."""


class TrackerUnavailableError(FocusTimeError):
    """Raised when the tracker state was left inconsistent by a failed update.

    The tracker stays unavailable until ``init()`` is called again.
    """
