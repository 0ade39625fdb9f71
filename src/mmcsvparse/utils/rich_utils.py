"""Rich utilities: shared console, themes, and helpers."""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.table import Table
from rich.theme import Theme
from rich.traceback import install as rich_traceback_install

_console: Console | None = None


def get_console() -> Console:
    """Return a shared Rich Console instance writing to stderr.

    Creates the console on first use with a pleasant default theme. Stderr
    keeps stdout free for CSV output.
    """
    global _console
    if _console is None:
        theme = Theme(
            {
                "info": "cyan",
                "warning": "yellow",
                "error": "red",
                "success": "green",
                "muted": "grey62",
            }
        )
        _console = Console(theme=theme, highlight=False, soft_wrap=False, stderr=True)
    return _console


def install_rich_tracebacks() -> None:
    """Enable rich tracebacks globally for nicer error output."""
    rich_traceback_install(show_locals=False, word_wrap=True, suppress=["click"])


def render_summary(title: str, summary: dict[str, Any]) -> None:
    """Print a two-column key/value table."""
    table = Table(title=title, show_header=False, title_style="info")
    table.add_column("Field", style="muted")
    table.add_column("Value")
    for key, value in summary.items():
        table.add_row(key.replace("_", " "), str(value))
    get_console().print(table)
