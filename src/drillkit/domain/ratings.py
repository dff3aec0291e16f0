"""Rated items and the minimum-rating filter."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel

RATING_THRESHOLD = 4.0


class RatedItem(BaseModel):
    """A titled item carrying a numeric rating."""

    model_config = {"frozen": True}

    title: str
    rating: float


def filter_by_rating(
    items: Iterable[RatedItem],
    threshold: float = RATING_THRESHOLD,
) -> list[RatedItem]:
    """Keep items rated at or above *threshold*, in their original order."""
    return [item for item in items if item.rating >= threshold]
