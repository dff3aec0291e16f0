"""Deferred squaring — the one asynchronous, failable drill.

INVARIANT: the coroutine settles exactly once, after the delay, and the
sign check happens only once the delay has elapsed.
"""

from __future__ import annotations

import asyncio

DEFAULT_DELAY_SECONDS = 1.0


class NegativeNumberError(ValueError):
    """Raised when a negative number is squared."""

    def __init__(self, n: int | float) -> None:
        super().__init__("negative number not allowed")
        self.n = n


async def square_async(n: int | float, *, delay: float = DEFAULT_DELAY_SECONDS) -> int | float:
    """Return ``n * n`` after *delay* seconds.

    Raises:
        NegativeNumberError: If *n* is negative.
    """
    await asyncio.sleep(delay)
    if n < 0:
        raise NegativeNumberError(n)
    return n * n
