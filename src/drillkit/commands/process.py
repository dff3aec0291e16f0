"""Command: process a text-or-number value."""

from __future__ import annotations

from typing import TYPE_CHECKING, get_args

import click

from drillkit.commands._base import DrillCommand
from drillkit.domain.values import ValueKind, parse_value
from drillkit.services.drills import DrillService

if TYPE_CHECKING:
    from drillkit.commands._context import AppContext


@click.command(
    cls=DrillCommand,
    examples="""\
  drillkit process hello
  drillkit process 10
  drillkit process 10 --as text
  drillkit process -- -2.5""",
)
@click.argument("value")
@click.option(
    "--as",
    "kind",
    type=click.Choice(get_args(ValueKind)),
    default="auto",
    show_default=True,
    help="Treat VALUE as text or number.",
)
@click.pass_obj
def process(app: AppContext, value: str, kind: ValueKind) -> None:
    """Length of a text VALUE, or double a numeric one."""
    try:
        tagged = parse_value(value, kind)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="VALUE") from exc
    app.emit(DrillService(app.settings).process_value(tagged))
