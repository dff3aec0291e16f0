"""Sanity checks on the canonical sample inputs."""

from drillkit.domain import samples


def test_samples_cover_both_square_outcomes() -> None:
    assert any(n >= 0 for n in samples.SAMPLE_SQUARES)
    assert any(n < 0 for n in samples.SAMPLE_SQUARES)


def test_sample_car() -> None:
    assert samples.SAMPLE_CAR.model == "Corolla"
    assert samples.SAMPLE_CAR.vehicle.year == 2020


def test_sample_products_include_a_price_tie() -> None:
    prices = [p.price for p in samples.SAMPLE_PRODUCTS]
    assert prices.count(max(prices)) > 1
