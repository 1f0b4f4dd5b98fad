"""Unit tests for the exception hierarchy.

Tests focus on the context each error carries.
"""

from pagewalk.core import (
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


def test_invalid_argument_error_names_argument():
    error = InvalidArgumentError("batch_loader")
    assert error.argument == "batch_loader"
    assert "batch_loader" in str(error)
    assert isinstance(error, ValueError)
    assert isinstance(error, ContinuationError)


def test_batch_errors_carry_token_and_cause():
    cause = OSError("disk")
    error = BatchLoadError("load failed", token="t-9", cause=cause)
    assert error.token == "t-9"
    assert error.cause is cause
    assert isinstance(error, BatchWorkerError)
    assert isinstance(BatchProcessError("x"), BatchWorkerError)


def test_codec_errors():
    assert isinstance(TokenEncodingError("x"), TokenCodecError)
    assert isinstance(TokenDecodingError("x"), ContinuationError)
    assert TokenDecodingError("x").cause is None


def test_cancelled_error_default_message():
    assert str(OperationCancelledError()) == "Operation was cancelled"
