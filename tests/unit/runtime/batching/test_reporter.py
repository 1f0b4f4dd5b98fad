"""Unit tests for the metrics reporter."""

from __future__ import annotations

from pagewalk.runtime.batching import MetricsReporter


def report(reporter: MetricsReporter, *, items=1, ms=1, total=None, completed=None, nxt=None):
    reporter.report_processed_batch(
        items=items,
        elapsed_nanos=ms * 1_000_000,
        total=total,
        completed_token=completed,
        next_token=nxt,
    )


def test_fresh_reporter_snapshot():
    """Test snapshot before any batch does not leak the min sentinel."""
    snapshot = MetricsReporter().snapshot()
    assert snapshot.processed_batches == 0
    assert snapshot.batch_min_time_ms == 0
    assert snapshot.total_items is None
    assert not snapshot.is_finished


def test_first_batch_sets_minimum():
    reporter = MetricsReporter()
    report(reporter, ms=250)
    snapshot = reporter.snapshot()
    assert snapshot.batch_min_time_ms == 250
    assert snapshot.batch_max_time_ms == 250


def test_accumulates_batches():
    reporter = MetricsReporter()
    report(reporter, items=10, ms=4, total=30, completed=None, nxt="a")
    report(reporter, items=10, ms=2, total=None, completed="a", nxt="b")
    report(reporter, items=5, ms=6, total=25, completed="b", nxt=None)

    snapshot = reporter.snapshot()
    assert snapshot.processed_items == 25
    assert snapshot.processed_batches == 3
    assert snapshot.batch_min_time_ms == 2
    assert snapshot.batch_max_time_ms == 6
    assert snapshot.total_time_ms == 12
    assert snapshot.total_items == 25
    assert snapshot.completed_token == "b"
    assert snapshot.next_token is None
    assert snapshot.is_finished


def test_total_time_sums_nanoseconds_before_truncating():
    reporter = MetricsReporter()
    for _ in range(4):
        reporter.report_processed_batch(
            items=1, elapsed_nanos=1_500_000, total=None, completed_token=None, next_token="x"
        )

    snapshot = reporter.snapshot()
    assert snapshot.batch_max_time_ms == 1
    assert snapshot.total_time_ms == 6


def test_snapshot_is_a_copy():
    reporter = MetricsReporter()
    report(reporter, items=3)
    before = reporter.snapshot()
    report(reporter, items=4)

    assert before.processed_items == 3
    assert reporter.snapshot().processed_items == 7


def test_negative_elapsed_time_is_clamped():
    reporter = MetricsReporter()
    report(reporter, ms=4)
    reporter.report_processed_batch(
        items=1, elapsed_nanos=-3_000_000, total=None, completed_token=None, next_token=None
    )

    snapshot = reporter.snapshot()
    assert snapshot.batch_min_time_ms == 0
    assert snapshot.batch_max_time_ms == 4
    assert snapshot.total_time_ms == 4
