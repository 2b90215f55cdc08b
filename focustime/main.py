"""FocusTime application entry point.

Tracks how long each window holds focus and prints a status block on a
fixed cadence until interrupted (Ctrl+C or SIGTERM).

Usage:
    python -m focustime.main                         # defaults: 100ms poll, 1s report
    python -m focustime.main --poll-interval 0.25
    python -m focustime.main --config ~/focustime.json --verbose
"""

import argparse
import logging
import math
import signal
import sys
import threading

from focustime.core.config import load_config
from focustime.core.models import TrackerUnavailableError
from focustime.core.tracker import FocusTracker
from focustime.platform.factory import create_window_probe
from focustime.reporting.console import ConsoleReporter

logger = logging.getLogger(__name__)


def _positive_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}")
    if not math.isfinite(value) or value <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive finite number: {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="focustime",
        description="FocusTime — measure how long each window holds focus",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        default=None,
        help="Path to a JSON config file (default: platform data directory)",
    )
    parser.add_argument(
        "--poll-interval",
        type=_positive_float,
        metavar="SECONDS",
        default=None,
        help="How often to check the active window",
    )
    parser.add_argument(
        "--display-interval",
        type=_positive_float,
        metavar="SECONDS",
        default=None,
        help="How often to print the status block",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(args: list[str] | None = None) -> int:
    """Entry point for FocusTime.

    When *args* is ``None`` the arguments are read from ``sys.argv``.
    Returns the process exit status.
    """
    parser = build_parser()
    parsed = parser.parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    config = load_config(parsed.config)
    poll_interval = parsed.poll_interval or config["poll_interval_seconds"]
    display_interval = parsed.display_interval or config["display_interval_seconds"]

    try:
        probe = create_window_probe()
    except OSError as exc:
        logger.error("%s", exc)
        return 1

    tracker = FocusTracker(probe, poll_interval=poll_interval)
    tracker.init()
    reporter = ConsoleReporter(tracker, display_interval=display_interval)

    def _handle_sigterm(signum, frame):
        logger.info("Received signal %d; stopping", signum)
        tracker.stop()
        reporter.stop()

    signal.signal(signal.SIGTERM, _handle_sigterm)

    poll_thread = threading.Thread(
        target=tracker.run, daemon=True, name="focustime-poll"
    )
    poll_thread.start()
    try:
        reporter.run()
    except KeyboardInterrupt:
        logger.info("Interrupted; stopping")
    finally:
        tracker.stop()
        reporter.stop()
        poll_thread.join(timeout=5)
        try:
            tracker.cleanup()
        except TrackerUnavailableError:
            logger.debug("Tracker already unavailable at shutdown")
    return 0


if __name__ == "__main__":
    sys.exit(main())
