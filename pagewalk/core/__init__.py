"""Core components."""

from .cancellation import CancellationToken
from .exceptions import (
    BatchLoadError,
    BatchProcessError,
    BatchWorkerError,
    ContinuationError,
    InvalidArgumentError,
    OperationCancelledError,
    TokenCodecError,
    TokenDecodingError,
    TokenEncodingError,
)

__all__ = [
    "CancellationToken",
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
