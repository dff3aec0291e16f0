"""Command: weekday or weekend."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from drillkit.commands._base import DrillCommand
from drillkit.domain.days import Day, parse_day
from drillkit.services.drills import DrillService

if TYPE_CHECKING:
    from drillkit.commands._context import AppContext


@click.command(
    cls=DrillCommand,
    examples="""\
  drillkit day monday
  drillkit day Sunday""",
)
@click.argument("name", type=click.Choice([d.value for d in Day], case_sensitive=False))
@click.pass_obj
def day(app: AppContext, name: str) -> None:
    """Classify the day NAME as Weekday or Weekend."""
    app.emit(DrillService(app.settings).day_type(parse_day(name)))
