"""DemoService — replay every drill against the canonical samples."""

from __future__ import annotations

import asyncio
from typing import Any

from drillkit.domain import samples
from drillkit.services.base import BaseService
from drillkit.services.drills import DrillService
from drillkit.services.result import ServiceResult
from drillkit.services.square import SquareService
from drillkit.services.telemetry import trace_span, traced


def _payload(result: ServiceResult) -> dict[str, Any]:
    if result.ok:
        return result.data
    assert result.error is not None
    return {"error": result.error.code, "message": result.error.message}


class DemoService(BaseService):
    """Runs each drill once (or twice, for both outcomes) on the sample inputs."""

    @traced
    def run(self) -> ServiceResult:
        drills = DrillService(self._settings)
        data: dict[str, Any] = {}

        with trace_span("sync_drills"):
            data["format_string"] = [
                drills.format_string(samples.SAMPLE_TEXT, flag).data for flag in (True, False, None)
            ]
            data["filter_by_rating"] = drills.filter_by_rating(samples.SAMPLE_BOOKS).data
            data["concatenate"] = [
                drills.concatenate(*samples.SAMPLE_SEQUENCES).data,
                drills.concatenate(*samples.SAMPLE_NUMBER_SEQUENCES).data,
            ]
            car = samples.SAMPLE_CAR
            data["describe_vehicle"] = drills.describe_vehicle(
                car.vehicle.make, car.vehicle.year, car.model
            ).data
            data["process_value"] = [drills.process_value(v).data for v in samples.SAMPLE_VALUES]
            data["most_expensive"] = drills.most_expensive(samples.SAMPLE_PRODUCTS).data
            data["day_type"] = [drills.day_type(d).data for d in samples.SAMPLE_DAYS]

        with trace_span("square"):
            data["square"] = [_payload(r) for r in asyncio.run(self._squares())]

        return ServiceResult(ok=True, op="demo", data=data)

    async def _squares(self) -> list[ServiceResult]:
        svc = SquareService(self._settings)
        tasks = [(n, svc.schedule(n)) for n in samples.SAMPLE_SQUARES]
        return [await svc.settle(n, task) for n, task in tasks]
