"""Unit tests for listing, token and metrics models."""

import pytest
from pydantic import ValidationError

from pagewalk.models import ContinuableListing, ContinuationToken, Metrics


class TestContinuationToken:
    """Test ContinuationToken presence semantics."""

    def test_absent_and_empty_are_distinct(self):
        absent = ContinuationToken.empty()
        blank = ContinuationToken.of("")

        assert not absent.is_present
        assert blank.is_present
        assert absent.is_empty and blank.is_empty
        assert absent != blank

    def test_token_if_not_empty(self):
        assert ContinuationToken.of("abc").token_if_not_empty() == "abc"
        assert ContinuationToken.of("").token_if_not_empty() is None
        assert ContinuationToken.empty().token_if_not_empty() is None

    def test_frozen(self):
        token = ContinuationToken.of("abc")
        with pytest.raises(ValidationError):
            token.value = "other"


class TestContinuableListing:
    """Test ContinuableListing construction."""

    def test_of(self):
        listing = ContinuableListing.of([1, 2], "next", total=10)
        assert listing.content == [1, 2]
        assert listing.has_more
        assert len(listing) == 2

    def test_empty_is_final(self):
        listing = ContinuableListing.empty()
        assert not listing.has_more
        assert listing.content == []

    def test_arbitrary_item_types(self):
        class Blob:
            pass

        blob = Blob()
        listing = ContinuableListing.of([blob])
        assert listing.content[0] is blob

    def test_accepts_continuation_token(self):
        listing = ContinuableListing.of([1], ContinuationToken.of("abc"))
        assert listing.next_continuation_token == "abc"
        assert ContinuableListing.of([1], ContinuationToken.empty()).has_more is False

    def test_negative_total_rejected(self):
        with pytest.raises(ValidationError):
            ContinuableListing(content=[], total=-1)


class TestMetrics:
    """Test derived metrics."""

    def test_throughput_and_average(self):
        metrics = Metrics(processed_items=500, processed_batches=5, total_time_ms=250)
        assert metrics.items_per_second == 2000.0
        assert metrics.average_batch_time_ms == 50.0

    def test_no_elapsed_time(self):
        metrics = Metrics()
        assert metrics.items_per_second == 0.0
        assert metrics.average_batch_time_ms == 0.0

    def test_progress_percentage(self):
        assert Metrics(total_items=200, processed_items=50).progress_percentage == 25.0
        assert Metrics(total_items=None, processed_items=50).progress_percentage is None
        assert Metrics(total_items=10, processed_items=20).progress_percentage == 100.0
