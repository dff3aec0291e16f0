"""Command: case formatting."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from drillkit.commands._base import DrillCommand
from drillkit.services.drills import DrillService

if TYPE_CHECKING:
    from drillkit.commands._context import AppContext


@click.command(
    "format",
    cls=DrillCommand,
    examples="""\
  drillkit format "Hello"
  drillkit format "Hello" --upper
  drillkit format "Hello" --lower
  drillkit --json format "Hello" --lower""",
)
@click.argument("text")
@click.option(
    "--upper/--lower",
    "to_upper",
    default=None,
    help="Case to apply. Upper when neither is given.",
)
@click.pass_obj
def format_cmd(app: AppContext, text: str, to_upper: bool | None) -> None:
    """Upper- or lower-case TEXT."""
    app.emit(DrillService(app.settings).format_string(text, to_upper))
