"""Catalog records.

A :class:`CatalogItem` owns its bibliographic fields (title, author,
identifier) and composes a page/price collaborator for everything else.
The collaborator enforces its own range rules; the item never
re-validates what it accepted.
"""

from __future__ import annotations

import logging
import math
from decimal import Decimal, InvalidOperation
from typing import Any, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class PagedPricedItem(Protocol):
    """Page-count and price bookkeeping shared by catalog records."""

    def set_page_content(self, count: int) -> bool: ...

    def set_price(self, amount: Decimal | float | int | str) -> bool: ...

    def get_page_content(self) -> int | None: ...

    def get_price(self) -> Decimal | None: ...


def _to_decimal(amount: Decimal | float | int | str) -> Decimal | None:
    """Convert *amount* to Decimal, going through ``str`` for floats."""
    if isinstance(amount, Decimal):
        return amount
    if isinstance(amount, float):
        if not math.isfinite(amount):
            return None
        amount = str(amount)
    try:
        return Decimal(amount)
    except (InvalidOperation, TypeError, ValueError):
        return None


class GenericItem:
    """Default :class:`PagedPricedItem`.

    Invalid assignments (page count <= 0, negative or non-finite price)
    are ignored: the previous value stays and the setter returns False.
    """

    def __init__(self) -> None:
        self._page_content: int | None = None
        self._price: Decimal | None = None

    def set_page_content(self, count: int) -> bool:
        if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
            logger.warning("Rejected page count %r (must be a positive integer)", count)
            return False
        self._page_content = count
        return True

    def set_price(self, amount: Decimal | float | int | str) -> bool:
        value = None if isinstance(amount, bool) else _to_decimal(amount)
        if value is None or not value.is_finite() or value < 0:
            logger.warning("Rejected price %r (must be a finite amount >= 0)", amount)
            return False
        self._price = value
        return True

    def get_page_content(self) -> int | None:
        return self._page_content

    def get_price(self) -> Decimal | None:
        return self._price


class CatalogItem:
    """A title/author/identifier record with delegated page and price fields.

    Args:
        title: Display title.
        author: Author name.
        identifier: ISBN-like identifier.
        page_count: Forwarded to ``base.set_page_content``.
        price: Forwarded to ``base.set_price``.
        base: Page/price collaborator; a fresh :class:`GenericItem` if omitted.
    """

    def __init__(
        self,
        title: str,
        author: str,
        identifier: str,
        page_count: int,
        price: Decimal | float | int | str,
        *,
        base: PagedPricedItem | None = None,
    ) -> None:
        self._title = title
        self._author = author
        self._identifier = identifier
        self._base: PagedPricedItem = base if base is not None else GenericItem()
        self._pages_accepted = self._base.set_page_content(page_count)
        self._price_accepted = self._base.set_price(price)

    def __repr__(self) -> str:
        return (
            f"CatalogItem(title={self._title!r}, author={self._author!r}, "
            f"identifier={self._identifier!r}, page_count={self.page_count!r}, "
            f"price={self.price!r})"
        )

    # --- Bibliographic fields ---

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: str) -> None:
        self._title = value

    @property
    def author(self) -> str:
        return self._author

    @author.setter
    def author(self, value: str) -> None:
        self._author = value

    @property
    def identifier(self) -> str:
        return self._identifier

    @identifier.setter
    def identifier(self, value: str) -> None:
        self._identifier = value

    # --- Delegated to the base collaborator ---

    @property
    def base(self) -> PagedPricedItem:
        return self._base

    @property
    def page_count(self) -> int | None:
        return self._base.get_page_content()

    @property
    def price(self) -> Decimal | None:
        return self._base.get_price()

    def set_page_content(self, count: int) -> bool:
        return self._base.set_page_content(count)

    def set_price(self, amount: Decimal | float | int | str) -> bool:
        return self._base.set_price(amount)

    def rejected_fields(self) -> list[str]:
        """Constructor values the base refused: ``"page_count"`` and/or ``"price"``."""
        rejected: list[str] = []
        if not self._pages_accepted:
            rejected.append("page_count")
        if not self._price_accepted:
            rejected.append("price")
        return rejected

    def describe(self) -> str:
        """One-line summary, e.g. ``"Dune by Frank Herbert (412 pages)"``."""
        pages = self.page_count if self.page_count is not None else "?"
        return f"{self._title} by {self._author} ({pages} pages)"

    def to_dict(self) -> dict[str, Any]:
        price = self.price
        return {
            "title": self._title,
            "author": self._author,
            "identifier": self._identifier,
            "page_count": self.page_count,
            "price": str(price) if price is not None else None,
        }
