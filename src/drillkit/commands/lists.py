"""Commands over lists: rating filter, concatenation, most expensive."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from drillkit.commands._base import DrillCommand
from drillkit.commands._params import LABELLED_NUMBER
from drillkit.domain.products import Product
from drillkit.domain.ratings import RatedItem
from drillkit.services.drills import DrillService

if TYPE_CHECKING:
    from drillkit.commands._context import AppContext


@click.command(
    cls=DrillCommand,
    examples="""\
  drillkit ratings "Book A=4.5" "Book B=3.2" "Book C=5.0"
  drillkit ratings "Book A=4.5" "Book B=3.2" --threshold 3
  drillkit -q ratings "Book A=4.5" "Book B=3.2" --threshold 4.5""",
)
@click.argument("items", nargs=-1, type=LABELLED_NUMBER)
@click.option("--threshold", type=float, default=None, help="Override the minimum rating.")
@click.pass_obj
def ratings(app: AppContext, items: tuple[tuple[str, float], ...], threshold: float | None) -> None:
    """Keep ITEMS (title=rating) rated at or above the threshold."""
    settings = app.settings
    if threshold is not None:
        settings = settings.model_copy(
            update={"ratings": settings.ratings.model_copy(update={"threshold": threshold})}
        )
    rated = [RatedItem(title=title, rating=rating) for title, rating in items]
    app.emit(DrillService(settings).filter_by_rating(rated))


def _require_separator(ctx: click.Context, param: click.Parameter, value: str) -> str:
    if not value:
        raise click.BadParameter("separator must not be empty", ctx=ctx, param=param)
    return value


@click.command(
    cls=DrillCommand,
    examples="""\
  drillkit concat a,b c
  drillkit concat "1 2" "3 4" 5 --sep " "
  drillkit --json concat""",
)
@click.argument("sequences", nargs=-1)
@click.option(
    "--sep",
    default=",",
    show_default=True,
    callback=_require_separator,
    help="Separator inside each SEQUENCE.",
)
@click.pass_obj
def concat(app: AppContext, sequences: tuple[str, ...], sep: str) -> None:
    """Concatenate SEQUENCES, each a separator-joined list, in order."""
    arrays = [seq.split(sep) if seq else [] for seq in sequences]
    app.emit(DrillService(app.settings).concatenate(*arrays))


@click.command(
    cls=DrillCommand,
    examples="""\
  drillkit priciest Pen=10 Notebook=50 Bag=50
  drillkit --json priciest""",
)
@click.argument("products", nargs=-1, type=LABELLED_NUMBER)
@click.pass_obj
def priciest(app: AppContext, products: tuple[tuple[str, float], ...]) -> None:
    """Show the first most expensive of PRODUCTS (name=price)."""
    catalog = [Product(name=name, price=price) for name, price in products]
    app.emit(DrillService(app.settings).most_expensive(catalog))
