"""Unit tests for FocusAccumulator."""

from datetime import datetime, timedelta, timezone

import pytest

from focustime.core.accumulator import FocusAccumulator
from focustime.core.models import WindowRecord


T0 = datetime(2025, 1, 1, 9, 0, tzinfo=timezone.utc)


def _at(seconds: float) -> datetime:
    return T0 + timedelta(seconds=seconds)


# ---------------------------------------------------------------------------
# observe
# ---------------------------------------------------------------------------

class TestObserve:
    """Tests for FocusAccumulator.observe()."""

    def test_first_observation_creates_bucket(self):
        acc = FocusAccumulator(T0)
        credited = acc.observe("Editor", _at(2))

        assert credited == pytest.approx(2.0)
        assert acc.snapshot() == [WindowRecord(title="Editor", seconds=2.0)]

    def test_repeated_title_accumulates(self):
        acc = FocusAccumulator(T0)
        acc.observe("Editor", _at(1))
        acc.observe("Editor", _at(3.5))

        assert len(acc) == 1
        assert acc.record_at(0).seconds == pytest.approx(3.5)

    def test_interval_credited_to_title_seen_at_end(self):
        """A at 0, A at 0.5, B at 0.6: the last 0.1s goes to B, not A."""
        acc = FocusAccumulator(T0)
        acc.observe("A", _at(0))
        acc.observe("A", _at(0.5))
        acc.observe("B", _at(0.6))

        buckets = {r.title: r.seconds for r in acc.snapshot()}
        assert buckets["A"] == pytest.approx(0.5)
        assert buckets["B"] == pytest.approx(0.1)

    def test_observation_at_transition_time_credits_zero(self):
        acc = FocusAccumulator(T0)
        assert acc.observe("A", T0) == 0.0
        assert acc.record_at(0) == WindowRecord(title="A", seconds=0.0)

    def test_updates_last_transition_time(self):
        acc = FocusAccumulator(T0)
        acc.observe("A", _at(4))
        assert acc.last_transition_time == _at(4)

    def test_backward_clock_credits_zero(self):
        acc = FocusAccumulator(_at(10))
        credited = acc.observe("A", _at(5))

        assert credited == 0.0
        assert acc.record_at(0).seconds == 0.0

    def test_backward_clock_keeps_transition_time(self):
        """The transition time never moves backwards."""
        acc = FocusAccumulator(_at(10))
        acc.observe("A", _at(5))
        assert acc.last_transition_time == _at(10)

        acc.observe("A", _at(12))
        assert acc.record_at(0).seconds == pytest.approx(2.0)

    def test_total_equals_elapsed_time(self):
        acc = FocusAccumulator(T0)
        for i, title in enumerate(["A", "B", "A", "C", "B", "B"], start=1):
            acc.observe(title, _at(i * 0.25))

        assert sum(r.seconds for r in acc.snapshot()) == pytest.approx(1.5)


# ---------------------------------------------------------------------------
# reset / clear
# ---------------------------------------------------------------------------

class TestResetAndClear:
    """Tests for reset() and clear()."""

    def test_reset_discards_buckets_and_restarts_interval(self):
        acc = FocusAccumulator(T0)
        acc.observe("A", _at(5))

        acc.reset(_at(20))

        assert len(acc) == 0
        assert acc.last_transition_time == _at(20)
        acc.observe("B", _at(21))
        assert acc.record_at(0).seconds == pytest.approx(1.0)

    def test_clear_keeps_transition_time(self):
        acc = FocusAccumulator(T0)
        acc.observe("A", _at(5))

        acc.clear()

        assert len(acc) == 0
        assert acc.last_transition_time == _at(5)
        acc.observe("B", _at(7))
        assert acc.record_at(0).seconds == pytest.approx(2.0)


# ---------------------------------------------------------------------------
# Snapshot accessors
# ---------------------------------------------------------------------------

class TestSnapshots:
    """Tests for record_at() and snapshot()."""

    def test_record_at_out_of_range(self):
        acc = FocusAccumulator(T0)
        acc.observe("A", _at(1))

        assert acc.record_at(1) is None
        assert acc.record_at(-1) is None

    def test_record_at_on_empty(self):
        assert FocusAccumulator(T0).record_at(0) is None

    def test_record_at_covers_every_title(self):
        acc = FocusAccumulator(T0)
        acc.observe("A", _at(1))
        acc.observe("B", _at(2))
        acc.observe("C", _at(3))

        titles = {acc.record_at(i).title for i in range(len(acc))}
        assert titles == {"A", "B", "C"}

    def test_snapshot_is_a_copy(self):
        acc = FocusAccumulator(T0)
        acc.observe("A", _at(1))
        snap = acc.snapshot()

        acc.observe("A", _at(2))
        acc.clear()

        assert snap == [WindowRecord(title="A", seconds=1.0)]
