"""Shared library constants.

Token payloads are always text in a single, defined encoding before the
base64 transport step, so that non-ASCII payloads survive a round trip.
"""

from __future__ import annotations

import sys

# Text encoding applied to JSON payloads before base64 transport encoding
TOKEN_TEXT_ENCODING = "utf-8"

NANOS_PER_MILLI = 1_000_000

# Starting value for the per-batch minimum, replaced by the first batch
UNSET_MIN_BATCH_TIME_MS = sys.maxsize
