"""Batch returned by a continuable source."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .token import ContinuationToken, token_value

T = TypeVar("T")


class ContinuableListing(BaseModel, Generic[T]):
    """One page of items plus the token needed to fetch the next page.

    A missing ``next_continuation_token`` marks the final batch. ``total``
    is the item count across the whole source when the source reports one.
    """

    content: list[T] = Field(default_factory=list)
    next_continuation_token: str | None = None
    total: int | None = Field(default=None, ge=0)

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @field_validator("next_continuation_token", mode="before")
    @classmethod
    def unwrap_token(cls, v: Any) -> Any:
        """Accept ContinuationToken values built by the token codecs."""
        return token_value(v) if isinstance(v, ContinuationToken) else v

    @classmethod
    def of(
        cls,
        content: list[T],
        next_continuation_token: ContinuationToken | str | None = None,
        total: int | None = None,
    ) -> ContinuableListing[T]:
        return cls(content=content, next_continuation_token=next_continuation_token, total=total)

    @classmethod
    def empty(cls) -> ContinuableListing[T]:
        """Final batch without any items."""
        return cls(content=[], next_continuation_token=None, total=0)

    @property
    def has_more(self) -> bool:
        return self.next_continuation_token is not None

    def __len__(self) -> int:
        return len(self.content)
