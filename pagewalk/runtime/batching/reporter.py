"""Metrics accumulator owned by a single worker run."""

from __future__ import annotations

from ...config import NANOS_PER_MILLI, UNSET_MIN_BATCH_TIME_MS
from ...models import Metrics


def nanos_to_millis(nanos: int) -> int:
    return nanos // NANOS_PER_MILLI


class MetricsReporter:
    """Accumulates batch metrics and hands out immutable snapshots.

    A reporter is created fresh for every run and is never shared between
    runs, so it needs no locking.
    """

    def __init__(self) -> None:
        self._total_items: int | None = None
        self._completed_token: str | None = None
        self._next_token: str | None = None

        self._processed_items = 0
        self._processed_batches = 0
        self._batch_max_time_ms = 0
        self._batch_min_time_ms = UNSET_MIN_BATCH_TIME_MS
        self._total_time_nanos = 0

    @property
    def processed_batches(self) -> int:
        return self._processed_batches

    def report_processed_batch(
        self,
        *,
        items: int,
        elapsed_nanos: int,
        total: int | None,
        completed_token: str | None,
        next_token: str | None,
    ) -> None:
        """Record one completed batch.

        Args:
            items: Number of items in the batch
            elapsed_nanos: Load plus process time of the batch
            total: Total reported by the source for this batch, if any
            completed_token: Token that was consumed to load the batch
            next_token: Token returned by the source for the next batch
        """
        # A clock that steps backwards must not produce negative durations
        elapsed_nanos = max(0, elapsed_nanos)

        # Sources report a running grand total, so the latest report wins.
        if total is not None:
            self._total_items = total
        self._completed_token = completed_token
        self._next_token = next_token

        self._total_time_nanos += elapsed_nanos
        self._processed_items += items
        self._processed_batches += 1

        elapsed_ms = nanos_to_millis(elapsed_nanos)
        self._batch_max_time_ms = max(self._batch_max_time_ms, elapsed_ms)
        self._batch_min_time_ms = min(self._batch_min_time_ms, elapsed_ms)

    def snapshot(self) -> Metrics:
        return Metrics(
            total_items=self._total_items,
            completed_token=self._completed_token,
            next_token=self._next_token,
            processed_items=self._processed_items,
            processed_batches=self._processed_batches,
            batch_max_time_ms=self._batch_max_time_ms,
            batch_min_time_ms=self._batch_min_time_ms if self._processed_batches else 0,
            total_time_ms=nanos_to_millis(self._total_time_nanos),
        )
