"""Command: evaluate one or more scores."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gradectl.commands._base import GradeCommand

if TYPE_CHECKING:
    from gradectl.commands._context import AppContext


@click.command(
    cls=GradeCommand,
    # Negative scores must reach the argument instead of being parsed as options.
    context_settings={"ignore_unknown_options": True},
    examples="""\
  gradectl evaluate 95
  gradectl evaluate 89.5 72 -5
  gradectl --json evaluate 60
  gradectl -q evaluate 81 77 64""",
)
@click.argument("scores", nargs=-1, required=True, type=click.FLOAT)
@click.pass_obj
def evaluate(app: AppContext, scores: tuple[float, ...]) -> None:
    """Grade SCORES (percentages between 0 and 100)."""
    from gradectl.services.evaluate import GradeService

    svc = GradeService(app.settings)
    if len(scores) == 1:
        app.emit(svc.evaluate(scores[0]))
    else:
        app.emit(svc.evaluate_batch(scores))
