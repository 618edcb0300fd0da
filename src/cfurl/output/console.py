"""Rich Console factory and theme for cfurl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract. In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

CF_THEME = Theme(
    {
        "cf.ok": "bold green",
        "cf.error": "bold red",
        "cf.warning": "bold yellow",
        "cf.op": "bold cyan",
        "cf.key": "dim",
        "cf.url": "underline blue",
        "cf.command": "bold",
        "cf.alias": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Soft wrapping keeps long URLs on a single line.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=CF_THEME,
        no_color=no_color,
        highlight=False,
        soft_wrap=True,
        width=width or 120,
    )


def create_status_console() -> Console:
    """Console on stderr for transient status spinners."""
    return Console(stderr=True, theme=CF_THEME, highlight=False)


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
