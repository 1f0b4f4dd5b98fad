"""pagewalk - batch processing over continuation-token paginated sources."""

from .codec import JsonContinuationTokenCodec, decode_token, encode_token
from .core import (
    BatchLoadError,
    BatchProcessError,
    BatchWorkerError,
    CancellationToken,
    ContinuationError,
    InvalidArgumentError,
    OperationCancelledError,
    TokenCodecError,
    TokenDecodingError,
    TokenEncodingError,
)
from .models import ContinuableListing, ContinuationToken, Metrics
from .runtime import AsyncContinuableBatchWorker, ContinuableBatchWorker, worker

__version__ = "0.1.0"

__all__ = [
    # Workers
    "ContinuableBatchWorker",
    "AsyncContinuableBatchWorker",
    "worker",
    "CancellationToken",
    # Models
    "ContinuableListing",
    "ContinuationToken",
    "Metrics",
    # Tokens
    "JsonContinuationTokenCodec",
    "encode_token",
    "decode_token",
    # Exceptions
    "ContinuationError",
    "InvalidArgumentError",
    "OperationCancelledError",
    "BatchWorkerError",
    "BatchLoadError",
    "BatchProcessError",
    "TokenCodecError",
    "TokenEncodingError",
    "TokenDecodingError",
]
