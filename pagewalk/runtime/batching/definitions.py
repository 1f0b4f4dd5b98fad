"""Collaborator signatures, argument checks and error wrapping shared by batch workers."""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from typing import Any, Protocol, TypeVar

from ...core.cancellation import CancellationToken
from ...core.exceptions import BatchLoadError, BatchProcessError, InvalidArgumentError
from ...models import ContinuableListing, Metrics
from .telemetry import log_batch_error

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)
T_contra = TypeVar("T_contra", contravariant=True)


class BatchLoader(Protocol[T_co]):
    """Returns the batch for a token; None requests the first batch."""

    def __call__(self, token: str | None) -> ContinuableListing[T_co] | Mapping[str, Any]: ...


class BatchProcessor(Protocol[T_contra]):
    def __call__(self, items: list[T_contra]) -> None: ...


class AsyncBatchLoader(Protocol[T_co]):
    def __call__(
        self, token: str | None
    ) -> Awaitable[ContinuableListing[T_co] | Mapping[str, Any]]: ...


class AsyncBatchProcessor(Protocol[T_contra]):
    def __call__(self, items: list[T_contra]) -> Awaitable[None]: ...


ProgressCallback = Callable[[Metrics], None]
Clock = Callable[[], int]


def no_progress(metrics: Metrics) -> None:
    """Default progress callback."""


def require_callable(name: str, value: Any) -> None:
    """Raise InvalidArgumentError unless value is a callable.

    Args:
        name: Argument name reported in the error
        value: Value passed by the caller

    Raises:
        InvalidArgumentError: If value is None or not callable
    """
    if value is None:
        raise InvalidArgumentError(name)
    if not callable(value):
        raise InvalidArgumentError(
            name, f"Argument '{name}' must be callable, got {type(value).__name__}"
        )


def require_run_arguments(
    progress_callback: ProgressCallback | None,
    cancellation_token: CancellationToken | None,
) -> None:
    """Validate the explicit arguments of a full-form run."""
    require_callable("progress_callback", progress_callback)
    if cancellation_token is None:
        raise InvalidArgumentError("cancellation_token")


def coerce_listing(result: Any) -> ContinuableListing[Any]:
    """Accept a listing or a mapping with the same fields from a loader.

    Raises:
        TypeError: If the loader returned anything else
        pydantic.ValidationError: If a mapping does not describe a listing
    """
    if isinstance(result, ContinuableListing):
        return result
    if isinstance(result, Mapping):
        return ContinuableListing.model_validate(result)
    raise TypeError(
        f"Batch loader must return a ContinuableListing, got {type(result).__name__}"
    )


def load_error(token: str | None, error: Exception) -> BatchLoadError:
    """Log a failed load and build the error to raise from it."""
    log_batch_error(
        stage="load", token=token, error_type=type(error).__name__, error_message=str(error)
    )
    return BatchLoadError(
        f"Failed to load next batch with token: {token!r}", token=token, cause=error
    )


def process_error(token: str | None, error: Exception) -> BatchProcessError:
    """Log a failed batch processing and build the error to raise from it."""
    log_batch_error(
        stage="process", token=token, error_type=type(error).__name__, error_message=str(error)
    )
    return BatchProcessError(
        f"Failed to process batch loaded with token: {token!r}", token=token, cause=error
    )
