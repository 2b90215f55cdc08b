"""Factory for creating the appropriate ActiveWindowProbe for the current OS."""

import sys

from focustime.platform.base import ActiveWindowProbe


def create_window_probe() -> ActiveWindowProbe:
    """Detect the current OS and return the matching ActiveWindowProbe.

    Uses lazy imports so platform-specific modules are only loaded on
    the OS where they are actually needed.

    Returns:
        A concrete ActiveWindowProbe for the current platform.

    Raises:
        OSError: If the current platform is not supported.
    """
    if sys.platform == "darwin":
        from focustime.platform.macos import MacOSWindowProbe
        return MacOSWindowProbe()

    if sys.platform == "win32":
        from focustime.platform.windows import WindowsWindowProbe
        return WindowsWindowProbe()

    if sys.platform.startswith("linux"):
        from focustime.platform.linux import X11WindowProbe
        return X11WindowProbe()

    raise OSError(
        f"Unsupported platform: {sys.platform!r}. "
        "FocusTime supports Windows (win32), macOS (darwin) and Linux/X11."
    )
