"""Command: replay every drill on the built-in samples."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from drillkit.commands._base import DrillCommand
from drillkit.services.demo import DemoService

if TYPE_CHECKING:
    from drillkit.commands._context import AppContext


@click.command(
    cls=DrillCommand,
    examples="""\
  drillkit demo
  drillkit --json demo""",
)
@click.pass_obj
def demo(app: AppContext) -> None:
    """Run each drill once against its sample input."""
    app.emit(DemoService(app.settings).run())
