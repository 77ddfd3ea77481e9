"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). Renderers are
dispatched by ``result.op`` in :func:`render_result`; unknown ops fall
through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from wgraph.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from wgraph.services.result import ServiceResult

_Renderer = Callable[["ServiceResult", "Console"], None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
        if verbose and result.meta:
            _render_meta(console, result.meta)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    rows = result.data.get("steps") or result.data.get("items")
    if rows and isinstance(rows, list):
        return "\n".join(str(row["id"]) for row in rows if isinstance(row, dict) and "id" in row)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="wg.ok"), Text(f"  {result.op}", style="wg.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="wg.key")
    if key == "id" or key.endswith("_id") or key in ("a", "b"):
        v = Text(str(value), style="wg.id")
    elif key == "weight" or key == "distance":
        v = Text(_weight(value), style="wg.weight")
    elif key == "info":
        v = Text(str(value), style="wg.info")
    elif isinstance(value, (dict, list)):
        v = Text(json.dumps(value, separators=(",", ":")))
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _weight(value: Any) -> str:
    """Format a weight without a trailing ``.0`` for whole numbers."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _render_meta(console: Console, meta: dict[str, Any]) -> None:
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in meta.items():
        console.print(f"    {k}: {v}")


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(Text("ERROR", style="wg.error"), Text(f"  {result.op}", style="wg.op"), "—", Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Op renderers ──────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_neighbors(result: ServiceResult, console: Console) -> None:
    """Render a node and its adjacency as a table."""
    _status_line(console, result)
    _field(console, "id", result.data.get("id"))
    _field(console, "info", result.data.get("info", ""))
    items = result.data.get("items", [])
    if not items:
        console.print("  (isolated)")
        return

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Neighbor", style="wg.id", no_wrap=True)
    table.add_column("Info", style="wg.info")
    table.add_column("Weight", style="wg.weight", justify="right")
    for item in items:
        table.add_row(str(item["id"]), Text(item.get("info", "")), _weight(item["weight"]))
    console.print(table)


def _render_path(result: ServiceResult, console: Console) -> None:
    """Render a shortest path as a weighted chain."""
    steps = result.data.get("steps", [])
    if not steps:
        console.print("No path found.")
        return

    chain: list[str] = [f"[wg.id]{steps[0]['id']}[/wg.id]"]
    for step in steps[1:]:
        chain.append(f"-({_weight(step['weight'])})-> [wg.id]{step['id']}[/wg.id]")
    console.print(" ".join(chain))
    console.print(
        f"\nDistance: {_weight(result.data.get('distance'))}"
        f"  Hops: {result.data.get('length', 0)}"
    )


def _render_connected(result: ServiceResult, console: Console) -> None:
    connected = result.data.get("connected")
    nodes = result.data.get("nodes", 0)
    if connected:
        console.print(f"[wg.ok]connected[/wg.ok]  ({nodes} nodes)")
    else:
        console.print(f"[wg.error]disconnected[/wg.error]  ({nodes} nodes)")


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, _Renderer] = {
    "neighbors": _render_neighbors,
    "path": _render_path,
    "connected": _render_connected,
}
