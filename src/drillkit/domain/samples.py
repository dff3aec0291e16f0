"""Canonical sample inputs replayed by ``drillkit demo``."""

from __future__ import annotations

from drillkit.domain.days import Day
from drillkit.domain.products import Product
from drillkit.domain.ratings import RatedItem
from drillkit.domain.values import Number, Text
from drillkit.domain.vehicles import CarRecord

SAMPLE_TEXT = "Hello"

SAMPLE_BOOKS: tuple[RatedItem, ...] = (
    RatedItem(title="Book A", rating=4.5),
    RatedItem(title="Book B", rating=3.2),
    RatedItem(title="Book C", rating=5.0),
)

SAMPLE_SEQUENCES: tuple[tuple[str, ...], ...] = (("a", "b"), ("c",))

SAMPLE_NUMBER_SEQUENCES: tuple[tuple[int, ...], ...] = ((1, 2), (3, 4), (5,))

SAMPLE_CAR = CarRecord.build("Toyota", 2020, "Corolla")

SAMPLE_VALUES: tuple[Text | Number, ...] = (Text(value="hello"), Number(value=10))

SAMPLE_PRODUCTS: tuple[Product, ...] = (
    Product(name="Pen", price=10),
    Product(name="Notebook", price=50),
    Product(name="Bag", price=50),
)

SAMPLE_DAYS: tuple[Day, ...] = (Day.MONDAY, Day.SUNDAY)

SAMPLE_SQUARES: tuple[int, ...] = (4, -4)
