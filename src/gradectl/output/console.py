"""Rich Console factory and theme for gradectl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

GRADE_THEME = Theme(
    {
        "grade.ok": "bold green",
        "grade.error": "bold red",
        "grade.warning": "bold yellow",
        "grade.op": "bold cyan",
        "grade.key": "dim",
        "grade.score": "magenta",
        "grade.title": "bold",
        "grade.letter.A": "bold green",
        "grade.letter.B": "green",
        "grade.letter.C": "yellow",
        "grade.letter.D": "dark_orange",
        "grade.letter.F": "bold red",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=GRADE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_letter(letter: str) -> str:
    """Return the Rich style name for a letter grade ('' if unknown)."""
    return f"grade.letter.{letter}" if letter in ("A", "B", "C", "D", "F") else ""
