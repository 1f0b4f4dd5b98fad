"""Custom exception hierarchy."""

from __future__ import annotations


class ContinuationError(Exception):
    """Base exception for all library errors."""

    pass


class InvalidArgumentError(ContinuationError, ValueError):
    """A required argument or collaborator is missing or unusable.

    Raised eagerly, before any batch is loaded.
    """

    def __init__(self, argument: str, message: str | None = None) -> None:
        super().__init__(message or f"Argument '{argument}' must not be None")
        self.argument = argument


class OperationCancelledError(ContinuationError):
    """Cooperative cancellation was requested between two batches."""

    def __init__(self, message: str = "Operation was cancelled") -> None:
        super().__init__(message)


class BatchWorkerError(ContinuationError):
    """A batch could not be loaded or processed.

    Carries the continuation token that was in play when the batch failed,
    so that callers can log it or resume from it.
    """

    def __init__(
        self,
        message: str,
        token: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.token = token
        self.cause = cause


class BatchLoadError(BatchWorkerError):
    """Batch loader raised while fetching the batch for a token."""

    pass


class BatchProcessError(BatchWorkerError):
    """Batch processor raised while handling a loaded batch."""

    pass


class TokenCodecError(ContinuationError):
    """Continuation token could not be encoded or decoded."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class TokenEncodingError(TokenCodecError):
    """Payload could not be serialized into a token."""

    pass


class TokenDecodingError(TokenCodecError):
    """Token is not valid base64, UTF-8 or does not match the target type."""

    pass
