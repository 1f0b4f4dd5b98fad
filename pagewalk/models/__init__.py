"""Data models for continuable sources.

Architecture:
    All models are Pydantic v2 and immutable (frozen=True). Metrics are
    handed to progress callbacks as snapshots, so a callback holding on to
    one never observes later batches.

Model Categories:
    - Paging: ContinuableListing, ContinuationToken
    - Reporting: Metrics
"""

from .listing import ContinuableListing
from .metrics import Metrics
from .token import ContinuationToken, token_value

__all__ = [
    "ContinuableListing",
    "ContinuationToken",
    "Metrics",
    "token_value",
]
