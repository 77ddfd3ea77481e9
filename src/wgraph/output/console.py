"""Rich Console factory and theme for wgraph output.

Consoles render into a StringIO buffer so renderers keep a
``render_result() -> str`` contract. In non-TTY environments (tests,
pipes) Rich disables color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

WGRAPH_THEME = Theme(
    {
        "wg.ok": "bold green",
        "wg.error": "bold red",
        "wg.warning": "bold yellow",
        "wg.op": "bold cyan",
        "wg.key": "dim",
        "wg.id": "bold blue",
        "wg.info": "bold",
        "wg.weight": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (useful for stable test output).
    """
    return Console(
        file=StringIO(),
        theme=WGRAPH_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
