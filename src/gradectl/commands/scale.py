"""Command: show the grading scale."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gradectl.commands._base import GradeCommand

if TYPE_CHECKING:
    from gradectl.commands._context import AppContext


@click.command(
    cls=GradeCommand,
    examples="""\
  gradectl scale
  gradectl --json scale""",
)
@click.pass_obj
def scale(app: AppContext) -> None:
    """Show grade bands and their performance messages."""
    from gradectl.services.evaluate import GradeService

    app.emit(GradeService(app.settings).scale())
