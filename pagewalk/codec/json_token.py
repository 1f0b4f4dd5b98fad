"""JSON continuation tokens.

A token carries structured state as JSON text, encoded as UTF-8 and then as
standard base64, so it can travel as a single opaque string.
"""

from __future__ import annotations

import base64
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_json

from ..config import TOKEN_TEXT_ENCODING
from ..core.exceptions import TokenDecodingError, TokenEncodingError
from ..models import ContinuationToken

T = TypeVar("T")


@lru_cache(maxsize=128)
def _adapter_for(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


class JsonContinuationTokenCodec:
    """Builds continuation tokens from payloads and reads them back.

    The codec holds no per-call state and can be shared between threads.
    """

    def __init__(self, *, by_alias: bool = False, strict: bool | None = None) -> None:
        """Initialize codec.

        Args:
            by_alias: Serialize pydantic models using field aliases
            strict: Validate decoded payloads in pydantic strict mode
        """
        self._by_alias = by_alias
        self._strict = strict

    def encode(self, payload: Any) -> ContinuationToken:
        """Build a continuation token carrying the given payload.

        Raises:
            TokenEncodingError: If the payload cannot be serialized as JSON
        """
        try:
            json_bytes = to_json(payload, by_alias=self._by_alias)
        except (PydanticSerializationError, ValueError, RecursionError) as e:
            raise TokenEncodingError("Could not encode payload as JSON", cause=e) from e
        return ContinuationToken.of(base64.b64encode(json_bytes).decode("ascii"))

    def decode(self, token: ContinuationToken | str | None, target: type[T]) -> T | None:
        """Read the payload of a token.

        Args:
            token: Token produced by ``encode``, its string value, or None
            target: Type to validate the payload into (any pydantic-supported type)

        Returns:
            The payload, or None if the token is absent or empty

        Raises:
            TokenDecodingError: If the token is not base64-encoded UTF-8 JSON
                or the JSON does not match ``target``
        """
        value = token.token_if_not_empty() if isinstance(token, ContinuationToken) else token
        if not value:
            return None

        try:
            json_text = base64.b64decode(value, validate=True).decode(TOKEN_TEXT_ENCODING)
        except ValueError as e:
            raise TokenDecodingError("Token is not valid base64 encoded text", cause=e) from e

        try:
            return _adapter_for(target).validate_json(json_text, strict=self._strict)
        except ValidationError as e:
            raise TokenDecodingError(
                f"Could not parse token as JSON for {target!r}", cause=e
            ) from e


_default_codec = JsonContinuationTokenCodec()


def encode_token(payload: Any) -> ContinuationToken:
    """Encode a payload with the default codec."""
    return _default_codec.encode(payload)


def decode_token(token: ContinuationToken | str | None, target: type[T]) -> T | None:
    """Decode a token with the default codec."""
    return _default_codec.decode(token, target)
