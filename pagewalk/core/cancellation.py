"""Cooperative cancellation signal."""

from __future__ import annotations

import threading
from typing import ClassVar

from .exceptions import OperationCancelledError


class CancellationToken:
    """Pollable cancellation flag.

    Workers check the token once per batch boundary; cancelling never
    interrupts a loader or processor call that is already running. The flag
    may be set from any thread.
    """

    NEVER: ClassVar[CancellationToken]

    def __init__(self) -> None:
        self._event = threading.Event()

    @property
    def is_cancellation_requested(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        """Request cancellation. Idempotent."""
        self._event.set()

    def throw_if_cancellation_requested(self) -> None:
        """Raise OperationCancelledError if cancellation was requested."""
        if self.is_cancellation_requested:
            raise OperationCancelledError()

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self.is_cancellation_requested})"


class _NeverCancellationToken(CancellationToken):
    """Shared default token that can never fire."""

    def cancel(self) -> None:
        raise RuntimeError("CancellationToken.NEVER cannot be cancelled")

    def __repr__(self) -> str:
        return "CancellationToken.NEVER"


CancellationToken.NEVER = _NeverCancellationToken()
