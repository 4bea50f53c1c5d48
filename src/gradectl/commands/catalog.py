"""Command: build and describe a catalog record."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gradectl.commands._base import GradeCommand

if TYPE_CHECKING:
    from gradectl.commands._context import AppContext


@click.command(
    cls=GradeCommand,
    examples="""\
  gradectl catalog --title Dune --author "Frank Herbert" --isbn 9780441013593 \\
      --pages 412 --price 9.99
  gradectl --json catalog --title T --author Au --isbn ISBN1 --pages 200 --price 9.99""",
)
@click.option("--title", required=True, help="Item title.")
@click.option("--author", required=True, help="Author name.")
@click.option("--isbn", "identifier", required=True, help="ISBN-like identifier.")
@click.option("--pages", "page_count", required=True, type=int, help="Page count (> 0).")
@click.option("--price", required=True, help="Price (>= 0).")
@click.pass_obj
def catalog(
    app: AppContext,
    title: str,
    author: str,
    identifier: str,
    page_count: int,
    price: str,
) -> None:
    """Describe a catalog item, reporting any rejected page count or price."""
    from gradectl.services.catalog import CatalogService

    svc = CatalogService(app.settings)
    app.emit(svc.register_item(title, author, identifier, page_count, price))
