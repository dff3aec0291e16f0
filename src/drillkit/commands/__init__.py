"""Subcommand modules for drillkit.

register_commands() imports lazily so ``drillkit --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every drill command on the root CLI group."""
    from drillkit.commands.lists import concat, priciest, ratings
    from drillkit.commands.day import day
    from drillkit.commands.demo import demo
    from drillkit.commands.format_cmd import format_cmd
    from drillkit.commands.process import process
    from drillkit.commands.square import square
    from drillkit.commands.vehicle import vehicle

    cli.add_command(format_cmd)
    cli.add_command(ratings)
    cli.add_command(concat)
    cli.add_command(vehicle)
    cli.add_command(process)
    cli.add_command(priciest)
    cli.add_command(day)
    cli.add_command(square)
    cli.add_command(demo)
