"""X11 active window probe using python-xlib."""

import logging
from typing import Any, Optional

from focustime.platform.base import ActiveWindowProbe, decode_title

logger = logging.getLogger(__name__)

# Upper bound on parent hops when looking for a named ancestor of the
# focused window.
_MAX_PARENT_DEPTH = 16


class X11WindowProbe(ActiveWindowProbe):
    """Read the title of the window holding X11 input focus.

    A display connection is opened for every probe and closed again
    afterwards. Input focus often sits on an unnamed child of the managed
    frame, so the parent chain is walked until a window with a name is
    found. ``WM_NAME`` is preferred, with ``_NET_WM_NAME`` as fallback.
    """

    def __init__(self, display_name: Optional[str] = None) -> None:
        self.display_name = display_name

    def probe(self) -> Optional[str]:
        """Return the focused window's title.

        Returns ``None`` when the display cannot be opened, nothing has
        focus, or no window in the focus chain carries a name.
        """
        display = self._open_display()
        if display is None:
            return None

        try:
            focus = display.get_input_focus().focus
            # X.NONE and X.PointerRoot come back as plain integers.
            if focus is None or isinstance(focus, int):
                return None
            return self._find_title(display, focus)
        except Exception as exc:
            logger.debug("Failed to read X11 input focus: %s", exc)
            return None
        finally:
            try:
                display.close()
            except Exception as exc:
                logger.debug("Failed to close X display: %s", exc)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _open_display(self) -> Optional[Any]:
        """Connect to the X server, or return ``None`` on any error."""
        try:
            from Xlib import display

            return display.Display(self.display_name)
        except ImportError:
            logger.debug("python-xlib not available — cannot query X11 focus")
            return None
        except Exception as exc:
            logger.debug("Failed to open X display: %s", exc)
            return None

    def _find_title(self, display: Any, window: Any) -> Optional[str]:
        """Walk from *window* towards the root and return the first name."""
        root_id = display.screen().root.id
        for _ in range(_MAX_PARENT_DEPTH):
            if window is None or window.id == root_id:
                return None

            title = self._window_name(display, window)
            if title:
                return title

            window = window.query_tree().parent
        return None

    @staticmethod
    def _window_name(display: Any, window: Any) -> Optional[str]:
        name = window.get_wm_name()
        if name:
            return decode_title(name)

        prop = window.get_full_property(
            display.intern_atom("_NET_WM_NAME"),
            display.intern_atom("UTF8_STRING"),
        )
        if prop is not None and prop.value:
            return decode_title(prop.value)
        return None
