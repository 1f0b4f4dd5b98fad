"""Continuation token value type."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ContinuationToken(BaseModel):
    """Opaque resume handle for a continuable source.

    ``None`` means no token at all; an empty string is a present but empty
    token. Use ``is_present`` / ``is_empty`` instead of truthiness.
    """

    value: str | None = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of(cls, value: str | None) -> ContinuationToken:
        return cls(value=value)

    @classmethod
    def empty(cls) -> ContinuationToken:
        return cls(value=None)

    @property
    def is_present(self) -> bool:
        return self.value is not None

    @property
    def is_empty(self) -> bool:
        """True when there is no token or the token is an empty string."""
        return not self.value

    def token_if_not_empty(self) -> str | None:
        return None if self.is_empty else self.value

    def __str__(self) -> str:
        return self.value or ""


def token_value(token: ContinuationToken | str | None) -> str | None:
    """Raw string of a token as passed to loaders; None when absent."""
    if isinstance(token, ContinuationToken):
        return token.value
    return token
