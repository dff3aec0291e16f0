"""Tests for the rating filter."""

import pytest
from pydantic import ValidationError

from drillkit.domain.ratings import RATING_THRESHOLD, RatedItem, filter_by_rating


def _books() -> list[RatedItem]:
    return [
        RatedItem(title="Book A", rating=4.5),
        RatedItem(title="Book B", rating=3.2),
        RatedItem(title="Book C", rating=5.0),
    ]


class TestFilterByRating:
    def test_keeps_high_ratings_in_order(self) -> None:
        kept = filter_by_rating(_books())
        assert kept == [
            RatedItem(title="Book A", rating=4.5),
            RatedItem(title="Book C", rating=5.0),
        ]

    def test_threshold_is_inclusive(self) -> None:
        item = RatedItem(title="Edge", rating=4)
        assert filter_by_rating([item]) == [item]
        assert RATING_THRESHOLD == 4.0

    def test_custom_threshold(self) -> None:
        kept = filter_by_rating(_books(), threshold=3.0)
        assert [i.title for i in kept] == ["Book A", "Book B", "Book C"]

    def test_empty(self) -> None:
        assert filter_by_rating([]) == []

    def test_accepts_any_iterable(self) -> None:
        kept = filter_by_rating(iter(_books()))
        assert len(kept) == 2

    def test_items_are_frozen(self) -> None:
        item = RatedItem(title="X", rating=1)
        with pytest.raises(ValidationError):
            item.rating = 5  # type: ignore[misc]
