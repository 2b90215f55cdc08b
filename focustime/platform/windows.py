"""Windows active window probe using ctypes with user32.dll."""

import ctypes
import logging
from typing import Optional

from focustime.platform.base import ActiveWindowProbe, decode_title

logger = logging.getLogger(__name__)

# Buffer size for window title retrieval, in wide characters.
_TITLE_BUFFER_SIZE = 512


class WindowsWindowProbe(ActiveWindowProbe):
    """Read the foreground window title on Windows.

    Uses ``ctypes`` with ``user32.dll``: ``GetForegroundWindow`` for the
    handle and ``GetWindowTextW`` for the title.
    """

    def __init__(self) -> None:
        try:
            self._user32 = ctypes.windll.user32  # type: ignore[attr-defined]
        except (AttributeError, OSError) as exc:
            logger.warning("user32.dll unavailable: %s", exc)
            self._user32 = None

    def probe(self) -> Optional[str]:
        """Return the foreground window's title.

        Returns ``None`` when there is no foreground window or its title
        is empty or unreadable.
        """
        if self._user32 is None:
            return None

        try:
            hwnd = self._user32.GetForegroundWindow()
            if not hwnd:
                return None
            return self._get_window_title(hwnd)
        except Exception as exc:
            logger.debug("Failed to get foreground window: %s", exc)
            return None

    def _get_window_title(self, hwnd: int) -> Optional[str]:
        """Retrieve the title of the given window handle."""
        try:
            buf = ctypes.create_unicode_buffer(_TITLE_BUFFER_SIZE)
            length = self._user32.GetWindowTextW(hwnd, buf, _TITLE_BUFFER_SIZE)
            if length > 0:
                return decode_title(buf.value[:length])
            return None
        except (OSError, Exception) as exc:
            logger.debug("GetWindowTextW failed: %s", exc)
            return None
