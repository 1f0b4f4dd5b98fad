"""Unit tests for CancellationToken."""

import threading

import pytest

from pagewalk.core import CancellationToken, OperationCancelledError


def test_new_token_is_not_cancelled():
    token = CancellationToken()
    assert not token.is_cancellation_requested
    token.throw_if_cancellation_requested()


def test_cancel_is_idempotent():
    token = CancellationToken()
    token.cancel()
    token.cancel()
    assert token.is_cancellation_requested
    with pytest.raises(OperationCancelledError):
        token.throw_if_cancellation_requested()


def test_cancel_from_other_thread():
    token = CancellationToken()
    thread = threading.Thread(target=token.cancel)
    thread.start()
    thread.join()
    assert token.is_cancellation_requested


def test_never_token_cannot_be_cancelled():
    with pytest.raises(RuntimeError):
        CancellationToken.NEVER.cancel()
    assert not CancellationToken.NEVER.is_cancellation_requested
    CancellationToken.NEVER.throw_if_cancellation_requested()
