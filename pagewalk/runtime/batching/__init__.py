"""Batch workers for continuable sources.

Architecture:
    - definitions.py: Collaborator protocols and argument checks
    - worker.py: Synchronous load, process, advance loop
    - async_worker.py: Same loop for coroutine loaders and processors
    - reporter.py: Per-run metrics accumulator
    - telemetry.py: Structured logging

Usage:
    Callers supply a loader that maps a continuation token to a
    ContinuableListing and a processor for the items of each batch. The
    worker keeps calling both until the source stops returning a token.
"""

from __future__ import annotations

from .async_worker import AsyncContinuableBatchWorker
from .definitions import (
    AsyncBatchLoader,
    AsyncBatchProcessor,
    BatchLoader,
    BatchProcessor,
    ProgressCallback,
)
from .reporter import MetricsReporter
from .worker import ContinuableBatchWorker, worker

__all__ = [
    "AsyncBatchLoader",
    "AsyncBatchProcessor",
    "AsyncContinuableBatchWorker",
    "BatchLoader",
    "BatchProcessor",
    "ContinuableBatchWorker",
    "MetricsReporter",
    "ProgressCallback",
    "worker",
]
