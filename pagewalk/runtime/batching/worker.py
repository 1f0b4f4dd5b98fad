"""Sequential batch worker for continuable sources.

The worker repeats three steps until the source runs out of pages:

1. Load the next batch for the current continuation token
2. Process the batch
3. Advance to the token returned with the batch

Basic metrics are collected along the way and reported after every batch.
"""

from __future__ import annotations

from time import perf_counter_ns
from typing import Any, Generic

from ...config import NANOS_PER_MILLI
from ...core.cancellation import CancellationToken
from ...core.exceptions import OperationCancelledError
from ...models import ContinuableListing, ContinuationToken, Metrics, token_value
from .definitions import (
    BatchLoader,
    BatchProcessor,
    Clock,
    ProgressCallback,
    T,
    coerce_listing,
    load_error,
    no_progress,
    process_error,
    require_callable,
    require_run_arguments,
)
from .reporter import MetricsReporter
from .telemetry import (
    log_batch_completed,
    log_worker_cancelled,
    log_worker_complete,
)


class ContinuableBatchWorker(Generic[T]):
    """Works through a continuable source one batch at a time.

    Loader, processor and progress callback all run in the calling thread,
    strictly in load, process, report order. Failures abort the run
    immediately; nothing is retried.
    """

    def __init__(
        self,
        batch_loader: BatchLoader[T],
        batch_processor: BatchProcessor[T],
        *,
        clock: Clock = perf_counter_ns,
    ) -> None:
        """Initialize batch worker.

        Args:
            batch_loader: Returns the batch for a token (None for the first batch)
            batch_processor: Handles the items of one batch
            clock: Monotonic clock in nanoseconds used for batch timings

        Raises:
            InvalidArgumentError: If a collaborator is missing or not callable
        """
        require_callable("batch_loader", batch_loader)
        require_callable("batch_processor", batch_processor)
        require_callable("clock", clock)

        self._batch_loader = batch_loader
        self._batch_processor = batch_processor
        self._clock = clock

    def process_all(
        self,
        progress_callback: ProgressCallback = no_progress,
        cancellation_token: CancellationToken = CancellationToken.NEVER,
    ) -> Metrics:
        """Process all items from the beginning of the source.

        See ``process_all_from`` for arguments and errors.
        """
        return self.process_all_from(None, progress_callback, cancellation_token)

    def process_all_from(
        self,
        start_token: ContinuationToken | str | None = None,
        progress_callback: ProgressCallback = no_progress,
        cancellation_token: CancellationToken = CancellationToken.NEVER,
    ) -> Metrics:
        """Process all items starting at the given token.

        Args:
            start_token: Token to resume from (a string or a ContinuationToken),
                None starts at the beginning
            progress_callback: Receives a metrics snapshot after every batch
            cancellation_token: Polled before each batch is loaded

        Returns:
            Metrics snapshot after the final batch

        Raises:
            InvalidArgumentError: If progress_callback or cancellation_token is None
            OperationCancelledError: If cancellation was requested between batches
            BatchLoadError: If the loader failed
            BatchProcessError: If the processor failed
        """
        require_run_arguments(progress_callback, cancellation_token)

        next_token = token_value(start_token)
        reporter = MetricsReporter()

        while True:
            check_cancellation(cancellation_token, reporter)

            start = self._clock()

            listing = self._load_next(next_token)
            items = listing.content

            self._process(items, next_token)

            current_token = next_token
            next_token = listing.next_continuation_token

            elapsed = self._clock() - start
            record_batch(reporter, listing, elapsed, current_token)

            progress_callback(reporter.snapshot())

            if next_token is None:
                break

        metrics = reporter.snapshot()
        log_worker_complete(metrics=metrics)
        return metrics

    def _load_next(self, token: str | None) -> ContinuableListing[T]:
        try:
            return coerce_listing(self._batch_loader(token))
        except Exception as e:
            raise load_error(token, e) from e

    def _process(self, items: list[T], token: str | None) -> None:
        try:
            self._batch_processor(items)
        except Exception as e:
            raise process_error(token, e) from e


def worker(
    batch_loader: BatchLoader[T], batch_processor: BatchProcessor[T]
) -> ContinuableBatchWorker[T]:
    """Create a batch worker."""
    return ContinuableBatchWorker(batch_loader, batch_processor)


def check_cancellation(cancellation_token: CancellationToken, reporter: MetricsReporter) -> None:
    """Raise OperationCancelledError if cancellation was requested, logging progress so far."""
    try:
        cancellation_token.throw_if_cancellation_requested()
    except OperationCancelledError:
        log_worker_cancelled(metrics=reporter.snapshot())
        raise


def record_batch(
    reporter: MetricsReporter,
    listing: ContinuableListing[Any],
    elapsed_nanos: int,
    completed_token: str | None,
) -> None:
    reporter.report_processed_batch(
        items=len(listing.content),
        elapsed_nanos=elapsed_nanos,
        total=listing.total,
        completed_token=completed_token,
        next_token=listing.next_continuation_token,
    )
    log_batch_completed(
        batch_index=reporter.processed_batches - 1,
        items=len(listing.content),
        latency_ms=elapsed_nanos / NANOS_PER_MILLI,
        completed_token=completed_token,
        next_token=listing.next_continuation_token,
    )
