"""Abstract base class for platform-specific active window probes."""

from abc import ABC, abstractmethod
from typing import Optional, Union


class ActiveWindowProbe(ABC):
    """Common interface for reading the focused window's title.

    Each supported platform (Windows, macOS, X11) provides a concrete
    implementation that uses OS-specific APIs behind this interface.
    Implementations never raise: any failure is reported as ``None``.
    """

    @abstractmethod
    def probe(self) -> Optional[str]:
        """Return the title of the focused window, or None if unavailable."""
        pass


def decode_title(raw: Union[bytes, str, None], encoding: str = "utf-8") -> Optional[str]:
    """Decode a raw window title, replacing malformed sequences.

    Strings are re-encoded so that lone surrogates (from broken UTF-16)
    become U+FFFD. Empty titles are returned as ``None``.
    """
    if raw is None:
        return None
    if isinstance(raw, bytes):
        title = raw.decode(encoding, errors="replace")
    else:
        title = raw.encode("utf-16", errors="surrogatepass").decode("utf-16", errors="replace")
    return title or None
