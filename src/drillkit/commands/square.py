"""Command: deferred squaring."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from drillkit.commands._base import DrillCommand
from drillkit.commands._params import NUMBER
from drillkit.services.square import SquareService

if TYPE_CHECKING:
    from drillkit.commands._context import AppContext


@click.command(
    cls=DrillCommand,
    examples="""\
  drillkit square 4
  drillkit square 4 --delay 0
  drillkit square -- -4""",
)
@click.argument("n", type=NUMBER)
@click.option(
    "--delay",
    type=click.FloatRange(min=0),
    default=None,
    help="Seconds to wait before answering (overrides config).",
)
@click.pass_obj
def square(app: AppContext, n: int | float, delay: float | None) -> None:
    """Square N after a delay. Negative N fails."""
    settings = app.settings
    if delay is not None:
        settings = settings.model_copy(
            update={"square": settings.square.model_copy(update={"delay_seconds": delay})}
        )
    app.emit(SquareService(settings).run(n))
