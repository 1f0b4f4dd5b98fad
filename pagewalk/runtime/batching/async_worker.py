"""Sequential batch worker for coroutine loaders and processors."""

from __future__ import annotations

from time import perf_counter_ns
from typing import Generic

from ...core.cancellation import CancellationToken
from ...models import ContinuableListing, ContinuationToken, Metrics, token_value
from .definitions import (
    AsyncBatchLoader,
    AsyncBatchProcessor,
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
from .telemetry import log_worker_complete
from .worker import check_cancellation, record_batch


class AsyncContinuableBatchWorker(Generic[T]):
    """Async counterpart of ContinuableBatchWorker.

    Batches are awaited one after another inside the calling task; there is
    no concurrent fetching. ``asyncio.CancelledError`` raised by the event
    loop propagates untouched, the cancellation token is only polled between
    batches.
    """

    def __init__(
        self,
        batch_loader: AsyncBatchLoader[T],
        batch_processor: AsyncBatchProcessor[T],
        *,
        clock: Clock = perf_counter_ns,
    ) -> None:
        require_callable("batch_loader", batch_loader)
        require_callable("batch_processor", batch_processor)
        require_callable("clock", clock)

        self._batch_loader = batch_loader
        self._batch_processor = batch_processor
        self._clock = clock

    async def process_all(
        self,
        progress_callback: ProgressCallback = no_progress,
        cancellation_token: CancellationToken = CancellationToken.NEVER,
    ) -> Metrics:
        return await self.process_all_from(None, progress_callback, cancellation_token)

    async def process_all_from(
        self,
        start_token: ContinuationToken | str | None = None,
        progress_callback: ProgressCallback = no_progress,
        cancellation_token: CancellationToken = CancellationToken.NEVER,
    ) -> Metrics:
        """Process all items starting at the given token.

        Same contract as ``ContinuableBatchWorker.process_all_from``.
        """
        require_run_arguments(progress_callback, cancellation_token)

        next_token = token_value(start_token)
        reporter = MetricsReporter()

        while True:
            check_cancellation(cancellation_token, reporter)

            start = self._clock()

            listing = await self._load_next(next_token)
            items = listing.content

            await self._process(items, next_token)

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

    async def _load_next(self, token: str | None) -> ContinuableListing[T]:
        try:
            return coerce_listing(await self._batch_loader(token))
        except Exception as e:
            raise load_error(token, e) from e

    async def _process(self, items: list[T], token: str | None) -> None:
        try:
            await self._batch_processor(items)
        except Exception as e:
            raise process_error(token, e) from e
