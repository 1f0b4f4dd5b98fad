"""Runtime components that drive continuable sources."""

from .batching import AsyncContinuableBatchWorker, ContinuableBatchWorker, worker

__all__ = ["AsyncContinuableBatchWorker", "ContinuableBatchWorker", "worker"]
