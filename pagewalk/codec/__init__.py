"""Continuation token codecs."""

from .json_token import JsonContinuationTokenCodec, decode_token, encode_token

__all__ = ["JsonContinuationTokenCodec", "decode_token", "encode_token"]
