"""Rich Console factory and theme for drillkit output.

Consoles render into a StringIO buffer so renderers keep a
``-> str`` contract. Outside a terminal Rich drops color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DRILL_THEME = Theme(
    {
        "drill.ok": "bold green",
        "drill.error": "bold red",
        "drill.warning": "bold yellow",
        "drill.op": "bold cyan",
        "drill.key": "dim",
        "drill.title": "bold",
        "drill.number": "magenta",
        "drill.weekend": "green",
        "drill.weekday": "blue",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    return Console(
        file=StringIO(),
        theme=DRILL_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
