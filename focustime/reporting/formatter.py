"""Text formatter for FocusTime status reports.

Renders tracker snapshots as the plain-text status block printed by the
reporting loop.
"""

from focustime.core.models import WindowRecord


class TextFormatter:
    """Formats tracker snapshots as human-readable plain text."""

    @staticmethod
    def format_seconds(seconds: float) -> str:
        """Format seconds with one fractional digit (e.g. '12.3')."""
        return f"{seconds:.1f}"

    @staticmethod
    def format_status(window_count: int, windows: list[WindowRecord]) -> str:
        """Render a status block.

        Returns text like::

            <blank line>
            Current window tracking status:
            Number of tracked windows: 2
            Window: Editor
              Focus time: 12.3 seconds
            Window: Browser
              Focus time: 4.0 seconds
        """
        lines = [
            "",
            "Current window tracking status:",
            f"Number of tracked windows: {window_count}",
        ]
        for record in windows:
            lines.append(f"Window: {record.title}")
            lines.append(
                f"  Focus time: {TextFormatter.format_seconds(record.seconds)} seconds"
            )
        return "\n".join(lines)
