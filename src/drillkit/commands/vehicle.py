"""Command: vehicle and car descriptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from drillkit.commands._base import DrillCommand
from drillkit.services.drills import DrillService

if TYPE_CHECKING:
    from drillkit.commands._context import AppContext


@click.command(
    cls=DrillCommand,
    examples="""\
  drillkit vehicle Toyota 2020
  drillkit vehicle Toyota 2020 --model Corolla""",
)
@click.argument("make")
@click.argument("year", type=int)
@click.option("--model", default=None, help="Describe a car of this model.")
@click.pass_obj
def vehicle(app: AppContext, make: str, year: int, model: str | None) -> None:
    """Describe a vehicle by MAKE and YEAR."""
    app.emit(DrillService(app.settings).describe_vehicle(make, year, model))
