"""Batch worker metrics snapshot."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Metrics(BaseModel):
    """Immutable snapshot of a worker run after a completed batch.

    Attributes:
        total_items: Last total reported by the source (None if never reported)
        completed_token: Token consumed to load the most recent batch
            (None for the very first batch)
        next_token: Token for the next batch (None once finished)
        processed_items: Cumulative number of processed items
        processed_batches: Cumulative number of processed batches
        batch_max_time_ms: Slowest single batch in milliseconds
        batch_min_time_ms: Fastest single batch in milliseconds
        total_time_ms: Cumulative batch time in milliseconds
    """

    total_items: int | None = None
    completed_token: str | None = None
    next_token: str | None = None
    processed_items: int = Field(default=0, ge=0)
    processed_batches: int = Field(default=0, ge=0)
    batch_max_time_ms: int = Field(default=0, ge=0)
    batch_min_time_ms: int = Field(default=0, ge=0)
    total_time_ms: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True)

    @property
    def is_finished(self) -> bool:
        return self.processed_batches > 0 and self.next_token is None

    @property
    def average_batch_time_ms(self) -> float:
        if self.processed_batches == 0:
            return 0.0
        return self.total_time_ms / self.processed_batches

    @property
    def items_per_second(self) -> float:
        """Throughput over the measured batch time."""
        if self.total_time_ms <= 0:
            return 0.0
        return self.processed_items * 1000.0 / self.total_time_ms

    @property
    def progress_percentage(self) -> float | None:
        """Share of the reported total already processed, None if unknown."""
        if not self.total_items:
            return None
        return min(100.0, (self.processed_items / self.total_items) * 100)
