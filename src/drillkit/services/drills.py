"""DrillService — the synchronous drills wrapped in ServiceResult."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from drillkit.domain.days import Day, get_day_type
from drillkit.domain.products import Product, get_most_expensive_product
from drillkit.domain.ratings import RatedItem, filter_by_rating
from drillkit.domain.sequences import concatenate_arrays
from drillkit.domain.text import format_string
from drillkit.domain.values import Number, Text, process_value
from drillkit.domain.vehicles import CarRecord, VehicleRecord, car_info, car_model, vehicle_info
from drillkit.services.base import BaseService
from drillkit.services.result import ServiceResult
from drillkit.services.telemetry import traced

logger = logging.getLogger(__name__)


class DrillService(BaseService):
    """One method per synchronous drill."""

    @traced
    def format_string(self, text: str, to_upper: bool | None = None) -> ServiceResult:
        """Upper- or lower-case *text*; an unset flag means upper."""
        mode = "lower" if to_upper is False else "upper"
        return ServiceResult(
            ok=True,
            op="format_string",
            data={"input": text, "mode": mode, "output": format_string(text, to_upper)},
        )

    @traced
    def filter_by_rating(self, items: Sequence[RatedItem]) -> ServiceResult:
        """Keep items rated at or above the configured threshold."""
        threshold = self._settings.ratings.threshold
        kept = filter_by_rating(items, threshold)
        logger.debug("Kept %d of %d items at threshold %s", len(kept), len(items), threshold)
        return ServiceResult(
            ok=True,
            op="filter_by_rating",
            data={
                "threshold": threshold,
                "count": len(kept),
                "items": [item.model_dump() for item in kept],
            },
        )

    @traced
    def concatenate(self, *arrays: Sequence[Any]) -> ServiceResult:
        """Concatenate sequences in call order."""
        warnings: list[str] = []
        if not arrays:
            warnings.append("No sequences given; result is empty")
        items = concatenate_arrays(*arrays)
        return ServiceResult(
            ok=True,
            op="concatenate",
            data={"count": len(items), "items": items},
            warnings=warnings,
        )

    @traced
    def describe_vehicle(self, make: str, year: int, model: str | None = None) -> ServiceResult:
        """Describe a plain vehicle, or a car when *model* is given."""
        data: dict[str, Any]
        if model is None:
            data = {"info": vehicle_info(VehicleRecord(make=make, year=year))}
        else:
            car = CarRecord.build(make, year, model)
            data = {"info": car_info(car), "model": car_model(car)}
        return ServiceResult(ok=True, op="describe_vehicle", data=data)

    @traced
    def process_value(self, value: Text | Number) -> ServiceResult:
        return ServiceResult(
            ok=True,
            op="process_value",
            data={"kind": value.kind, "input": value.value, "output": process_value(value)},
        )

    @traced
    def most_expensive(self, products: Sequence[Product]) -> ServiceResult:
        """Find the first highest-priced product.

        No products is not an error: ``found`` is False and ``product`` is None.
        """
        best = get_most_expensive_product(products)
        return ServiceResult(
            ok=True,
            op="most_expensive",
            data={
                "found": best is not None,
                "product": best.model_dump() if best is not None else None,
            },
        )

    @traced
    def day_type(self, day: Day) -> ServiceResult:
        return ServiceResult(
            ok=True,
            op="day_type",
            data={"day": day.value, "type": get_day_type(day).value},
        )
