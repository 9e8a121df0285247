"""Rich Console factory and theme for subsctl output.

Consoles render to a StringIO buffer so formatters can keep returning
plain strings. Outside a TTY (tests, pipes) Rich drops color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

SUBS_THEME = Theme(
    {
        "subs.ok": "bold green",
        "subs.error": "bold red",
        "subs.warning": "bold yellow",
        "subs.op": "bold cyan",
        "subs.key": "dim",
        "subs.id": "bold blue",
        "subs.status.active": "green",
        "subs.status.canceled": "yellow",
        "subs.status.expired": "red",
    }
)

_STATUS_STYLES: dict[str, str] = {
    "ACTIVE": "subs.status.active",
    "CANCELED": "subs.status.canceled",
    "EXPIRED": "subs.status.expired",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=SUBS_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_status(status: str) -> str:
    return _STATUS_STYLES.get(status, "")
