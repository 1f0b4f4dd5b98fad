"""Structured logging for batch worker runs.

Each helper logs a short event name as the message and puts the details in
``extra`` so that structured handlers can pick them up.
"""

from __future__ import annotations

import logging

from ...models import Metrics

logger = logging.getLogger(__name__)


def log_batch_completed(
    *,
    batch_index: int,
    items: int,
    latency_ms: float,
    completed_token: str | None,
    next_token: str | None,
) -> None:
    """Log completion of a single batch.

    Args:
        batch_index: Zero-based index of the batch within the run
        items: Number of items processed in this batch
        latency_ms: Load plus process time in milliseconds
        completed_token: Token consumed to load the batch
        next_token: Token returned for the next batch
    """
    logger.info(
        "batch_completed",
        extra={
            "batch_index": batch_index,
            "items": items,
            "latency_ms": latency_ms,
            "completed_token": completed_token,
            "next_token": next_token,
        },
    )


def log_batch_error(
    *,
    stage: str,
    token: str | None,
    error_type: str,
    error_message: str,
) -> None:
    """Log a failed batch.

    Args:
        stage: "load" or "process"
        token: Token in play when the batch failed
        error_type: Exception class name
        error_message: Exception message
    """
    logger.error(
        "batch_error",
        extra={
            "stage": stage,
            "token": token,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_worker_cancelled(*, metrics: Metrics) -> None:
    logger.warning(
        "batch_worker_cancelled",
        extra={
            "processed_batches": metrics.processed_batches,
            "processed_items": metrics.processed_items,
            "completed_token": metrics.completed_token,
            "next_token": metrics.next_token,
        },
    )


def log_worker_complete(*, metrics: Metrics) -> None:
    """Log the final metrics of a run that reached the end of the source."""
    logger.info(
        "batch_worker_complete",
        extra={
            "processed_batches": metrics.processed_batches,
            "processed_items": metrics.processed_items,
            "total_items": metrics.total_items,
            "total_time_ms": metrics.total_time_ms,
            "batch_max_time_ms": metrics.batch_max_time_ms,
            "batch_min_time_ms": metrics.batch_min_time_ms,
        },
    )
