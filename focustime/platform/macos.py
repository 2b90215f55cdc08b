"""macOS active window probe using the Quartz window list (pyobjc)."""

import logging
from typing import Any, Optional

from focustime.platform.base import ActiveWindowProbe, decode_title

logger = logging.getLogger(__name__)

# Window layer used by ordinary application windows; menu bar, dock and
# overlays live on higher layers.
_NORMAL_WINDOW_LAYER = 0


class MacOSWindowProbe(ActiveWindowProbe):
    """Report the owner of the front-most on-screen window on macOS.

    ``CGWindowListCopyWindowInfo`` returns on-screen windows ordered front
    to back. The first window on the normal layer belongs to the focused
    application; its ``kCGWindowOwnerName`` is used as the title. Reading
    window names requires the Screen Recording permission, owner names
    do not.
    """

    def probe(self) -> Optional[str]:
        """Return the front-most window owner name.

        Returns ``None`` when the window list is empty, Quartz is not
        available, or the owner name is missing.
        """
        windows = self._copy_window_list()
        if not windows:
            return None

        try:
            front = self._front_window(windows)
            owner = front.get("kCGWindowOwnerName") if front is not None else None
        except Exception as exc:
            logger.debug("Failed to read window owner: %s", exc)
            return None

        if owner is None:
            return None
        return decode_title(str(owner))

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _copy_window_list(self) -> Optional[Any]:
        """Return the on-screen window list, or ``None`` on any error."""
        try:
            import Quartz

            return Quartz.CGWindowListCopyWindowInfo(
                Quartz.kCGWindowListOptionOnScreenOnly,
                Quartz.kCGNullWindowID,
            )
        except ImportError:
            logger.debug("Quartz not available — cannot query window list")
            return None
        except Exception as exc:
            logger.debug("CGWindowListCopyWindowInfo failed: %s", exc)
            return None

    @staticmethod
    def _front_window(windows: Any) -> Optional[Any]:
        """Pick the front-most normal-layer window, else the first entry."""
        for window in windows:
            if window.get("kCGWindowLayer") == _NORMAL_WINDOW_LAYER:
                return window
        return windows[0] if len(windows) else None
