"""Allow ``python -m drillkit``."""

from drillkit.cli import cli

cli()
