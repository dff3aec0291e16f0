"""Sequence concatenation drill."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import chain
from typing import TypeVar

T = TypeVar("T")


def concatenate_arrays(*arrays: Sequence[T]) -> list[T]:
    """Flatten *arrays* into one new list, preserving call and element order.

    Called with no arguments, returns an empty list.
    """
    return list(chain.from_iterable(arrays))
