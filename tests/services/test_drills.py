"""Tests for DrillService."""

from __future__ import annotations

from drillkit.config.settings import DrillSettings
from drillkit.domain.days import Day
from drillkit.domain.products import Product
from drillkit.domain.ratings import RatedItem
from drillkit.domain.values import Number, Text
from drillkit.services.drills import DrillService


class TestFormatString:
    def test_modes(self, settings: DrillSettings) -> None:
        svc = DrillService(settings)
        assert svc.format_string("Hi").data == {"input": "Hi", "mode": "upper", "output": "HI"}
        assert svc.format_string("Hi", False).data["output"] == "hi"
        assert svc.format_string("Hi", True).data["mode"] == "upper"


class TestFilterByRating:
    def test_uses_configured_threshold(self, settings: DrillSettings) -> None:
        items = [RatedItem(title="A", rating=4.5), RatedItem(title="B", rating=3.2)]
        result = DrillService(settings).filter_by_rating(items)
        assert result.ok is True
        assert result.op == "filter_by_rating"
        assert result.data["threshold"] == 4.0
        assert result.data["count"] == 1
        assert result.data["items"] == [{"title": "A", "rating": 4.5}]

    def test_threshold_override(self, settings: DrillSettings) -> None:
        lowered = settings.model_copy(
            update={"ratings": settings.ratings.model_copy(update={"threshold": 3.0})}
        )
        items = [RatedItem(title="A", rating=4.5), RatedItem(title="B", rating=3.2)]
        assert DrillService(lowered).filter_by_rating(items).data["count"] == 2


class TestConcatenate:
    def test_order(self, settings: DrillSettings) -> None:
        result = DrillService(settings).concatenate(["a", "b"], ["c"])
        assert result.data == {"count": 3, "items": ["a", "b", "c"]}
        assert result.warnings == []

    def test_no_arguments_warns(self, settings: DrillSettings) -> None:
        result = DrillService(settings).concatenate()
        assert result.ok is True
        assert result.data["items"] == []
        assert len(result.warnings) == 1


class TestDescribeVehicle:
    def test_car(self, settings: DrillSettings) -> None:
        result = DrillService(settings).describe_vehicle("Toyota", 2020, "Corolla")
        assert result.data == {"info": "Make: Toyota, Year: 2020", "model": "Model: Corolla"}

    def test_plain_vehicle(self, settings: DrillSettings) -> None:
        result = DrillService(settings).describe_vehicle("Toyota", 2020)
        assert result.data == {"info": "Make: Toyota, Year: 2020"}


class TestProcessValue:
    def test_text_and_number(self, settings: DrillSettings) -> None:
        svc = DrillService(settings)
        assert svc.process_value(Text(value="hello")).data == {
            "kind": "text",
            "input": "hello",
            "output": 5,
        }
        assert svc.process_value(Number(value=10)).data["output"] == 20


class TestMostExpensive:
    def test_first_max(self, settings: DrillSettings) -> None:
        products = [
            Product(name="Pen", price=10),
            Product(name="Notebook", price=50),
            Product(name="Bag", price=50),
        ]
        result = DrillService(settings).most_expensive(products)
        assert result.data == {"found": True, "product": {"name": "Notebook", "price": 50.0}}

    def test_empty_is_success(self, settings: DrillSettings) -> None:
        result = DrillService(settings).most_expensive([])
        assert result.ok is True
        assert result.data == {"found": False, "product": None}


class TestDayType:
    def test_weekday_weekend(self, settings: DrillSettings) -> None:
        svc = DrillService(settings)
        assert svc.day_type(Day.MONDAY).data == {"day": "monday", "type": "Weekday"}
        assert svc.day_type(Day.SUNDAY).data["type"] == "Weekend"
