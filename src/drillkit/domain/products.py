"""Products and the most-expensive scan."""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel


class Product(BaseModel):
    model_config = {"frozen": True}

    name: str
    price: float


def get_most_expensive_product(products: Sequence[Product]) -> Product | None:
    """Return the first product with the highest price.

    Ties keep the earliest product. An empty sequence yields ``None``.
    """
    if not products:
        return None
    best = products[0]
    for product in products[1:]:
        if product.price > best.price:
            best = product
    return best
