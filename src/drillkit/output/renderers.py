"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from drillkit.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from drillkit.services.result import ServiceResult

Renderer = Callable[["ServiceResult", "Console"], None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console)
    if verbose:
        _render_meta(console, result)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output: the status line, or one line per item for list results."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list) and items:
        return "\n".join(_item_label(item) for item in items)
    product = result.data.get("product")
    if isinstance(product, dict):
        return _item_label(product)
    if "info" in result.data and result.data.get("model"):
        return f"{result.data['info']}\n{result.data['model']}"
    for key in ("output", "value", "type", "info"):
        if key in result.data:
            return str(result.data[key])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _item_label(item: Any) -> str:
    if isinstance(item, dict):
        return str(item.get("title") or item.get("name") or json.dumps(item))
    return str(item)


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="drill.ok"), Text(f"  {result.op}", style="drill.op"))


def _field(console: Console, key: str, value: Any) -> None:
    if isinstance(value, (dict, list)):
        value = json.dumps(value, separators=(",", ":"))
    style = "drill.number" if isinstance(value, (int, float)) else ""
    console.print(Text.assemble((f"  {key}: ", "drill.key"), (str(value), style)))


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        if key == "telemetry":
            _render_span(console, value, indent=4)
        else:
            console.print(f"    {key}: {value}")


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    duration = span.get("duration_ms", 0.0)
    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"
    line = f"{' ' * indent}[{style}]{duration:>8.2f}ms[/{style}]  {span.get('name', '?')}"
    if span.get("annotations"):
        pairs = ", ".join(f"{k}={v}" for k, v in span["annotations"].items())
        line += f"  ({pairs})"
    console.print(line)
    for child in span.get("children", []):
        _render_span(console, child, indent + 4)


# ── Generic and error renderers ──────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_error(result: ServiceResult, console: Console) -> None:
    msg = result.error.message if result.error else "Unknown error"
    console.print(
        Text("ERROR", style="drill.error"),
        Text(f"  {result.op}", style="drill.op"),
        Text(" — "),
        Text(msg),
    )
    if result.error and result.error.detail:
        for key, value in result.error.detail.items():
            _field(console, key, value)


# ── Operation renderers ──────────────────────────────────────────────


def _render_ratings(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    data = result.data
    _field(console, "threshold", data.get("threshold"))
    _field(console, "count", data.get("count", 0))
    items = data.get("items", [])
    if not items:
        return
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("Title", style="drill.title")
    table.add_column("Rating", style="drill.number", justify="right")
    for item in items:
        table.add_row(Text(str(item["title"])), f"{item['rating']:g}")
    console.print(table)


def _render_most_expensive(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    product = result.data.get("product")
    if product is None:
        console.print(Text("  no products", style="dim"))
        return
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("Name", style="drill.title")
    table.add_column("Price", style="drill.number", justify="right")
    table.add_row(Text(str(product["name"])), f"{product['price']:g}")
    console.print(table)


def _render_day_type(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    day_type = str(result.data.get("type", ""))
    style = "drill.weekend" if day_type == "Weekend" else "drill.weekday"
    _field(console, "day", result.data.get("day"))
    console.print(Text.assemble(("  type: ", "drill.key"), (day_type, style)))


def _render_demo(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    table = Table(show_header=True, show_lines=True, pad_edge=False, expand=False)
    table.add_column("Drill", style="drill.op", no_wrap=True)
    table.add_column("Result")
    for drill, payload in result.data.items():
        runs = payload if isinstance(payload, list) else [payload]
        table.add_row(
            drill, Text("\n".join(json.dumps(run, separators=(",", ":")) for run in runs))
        )
    console.print(table)


_OP_RENDERERS: dict[str, Renderer] = {
    "filter_by_rating": _render_ratings,
    "most_expensive": _render_most_expensive,
    "day_type": _render_day_type,
    "demo": _render_demo,
}
