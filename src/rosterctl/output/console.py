"""Rich Console factory and theme for rosterctl output.

Consoles render into a StringIO buffer so renderers stay pure
``ServiceResult -> str`` functions. Off a TTY (tests, pipes) Rich emits no
color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ROSTER_THEME = Theme(
    {
        "roster.ok": "bold green",
        "roster.error": "bold red",
        "roster.op": "bold cyan",
        "roster.key": "dim",
        "roster.id": "bold blue",
        "roster.name": "bold",
        "roster.department": "magenta",
        "roster.salary": "green",
        "roster.gender.male": "cyan",
        "roster.gender.female": "yellow",
    }
)

_GENDER_STYLES: dict[str, str] = {
    "male": "roster.gender.male",
    "female": "roster.gender.female",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console backed by a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override the render width (default 120).
    """
    return Console(
        file=StringIO(),
        theme=ROSTER_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Return everything rendered so far to a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_gender(gender: str) -> str:
    return _GENDER_STYLES.get(gender, "")
