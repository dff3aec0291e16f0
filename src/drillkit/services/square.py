"""SquareService — the deferred squaring drill as a cancellable task.

The domain coroutine raises on negative input; this service turns the
task's outcome into an explicit success or failure ServiceResult.
"""

from __future__ import annotations

import asyncio
import logging

from drillkit.domain.squares import NegativeNumberError, square_async
from drillkit.services.base import BaseService
from drillkit.services.result import ServiceResult
from drillkit.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)

_OP = "square"


class SquareService(BaseService):
    """Schedule, settle, and run deferred squarings."""

    @property
    def delay(self) -> float:
        return self._settings.square.delay_seconds

    def schedule(self, n: int | float) -> asyncio.Task[int | float]:
        """Start squaring *n* on the running loop.

        The returned task may be cancelled until it settles.
        """
        logger.debug("Scheduling square of %s after %.3fs", n, self.delay)
        return asyncio.create_task(square_async(n, delay=self.delay), name=f"square({n})")

    async def settle(self, n: int | float, task: asyncio.Task[int | float]) -> ServiceResult:
        """Wait for *task* and map its outcome onto a ServiceResult.

        Unexpected exceptions from the task propagate unchanged.
        """
        with trace_span("await_task"):
            await asyncio.wait({task})

        if task.cancelled():
            return ServiceResult.failure(_OP, "CANCELLED", f"Square of {n} was cancelled", input=n)

        exc = task.exception()
        if isinstance(exc, NegativeNumberError):
            return ServiceResult.failure(_OP, "NEGATIVE_NUMBER", str(exc), input=n)
        if exc is not None:
            raise exc

        return ServiceResult(ok=True, op=_OP, data={"input": n, "value": task.result()})

    @traced
    async def square(self, n: int | float) -> ServiceResult:
        """Schedule and settle in one step."""
        return await self.settle(n, self.schedule(n))

    @traced
    def run(self, n: int | float) -> ServiceResult:
        """Synchronous entry point: run :meth:`square` on a fresh event loop."""
        return asyncio.run(self.square(n))
