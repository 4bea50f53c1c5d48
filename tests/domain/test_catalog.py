"""Tests for CatalogItem and its page/price collaborator."""

from __future__ import annotations

import logging
from decimal import Decimal

import pytest

from gradectl.domain.catalog import CatalogItem, GenericItem, PagedPricedItem


class RecordingBase:
    """Collaborator that accepts everything and records the calls."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, object]] = []
        self.pages: int | None = None
        self.amount: Decimal | None = None

    def set_page_content(self, count: int) -> bool:
        self.calls.append(("set_page_content", count))
        self.pages = count
        return True

    def set_price(self, amount: Decimal | float | int | str) -> bool:
        self.calls.append(("set_price", amount))
        self.amount = Decimal(str(amount))
        return True

    def get_page_content(self) -> int | None:
        return self.pages

    def get_price(self) -> Decimal | None:
        return self.amount


class TestGenericItem:
    def test_starts_unset(self) -> None:
        item = GenericItem()
        assert item.get_page_content() is None
        assert item.get_price() is None

    def test_satisfies_protocol(self) -> None:
        assert isinstance(GenericItem(), PagedPricedItem)

    def test_accepts_positive_pages(self) -> None:
        item = GenericItem()
        assert item.set_page_content(1) is True
        assert item.get_page_content() == 1

    @pytest.mark.parametrize("count", [0, -3])
    def test_rejects_non_positive_pages(self, count: int) -> None:
        item = GenericItem()
        item.set_page_content(120)
        assert item.set_page_content(count) is False
        assert item.get_page_content() == 120

    @pytest.mark.parametrize("count", [True, 12.5, "12"])
    def test_rejects_non_integer_pages(self, count: object) -> None:
        item = GenericItem()
        assert item.set_page_content(count) is False  # type: ignore[arg-type]
        assert item.get_page_content() is None

    @pytest.mark.parametrize(
        ("amount", "expected"),
        [
            (9.99, Decimal("9.99")),
            (0, Decimal("0")),
            ("12.50", Decimal("12.50")),
            (Decimal("3.10"), Decimal("3.10")),
        ],
    )
    def test_accepts_non_negative_price(self, amount: object, expected: Decimal) -> None:
        item = GenericItem()
        assert item.set_price(amount) is True  # type: ignore[arg-type]
        assert item.get_price() == expected

    @pytest.mark.parametrize(
        "amount", [-0.01, float("nan"), float("inf"), "free", "NaN", Decimal("-1"), None, False]
    )
    def test_rejects_invalid_price(self, amount: object) -> None:
        item = GenericItem()
        item.set_price(5)
        assert item.set_price(amount) is False  # type: ignore[arg-type]
        assert item.get_price() == Decimal("5")

    def test_rejection_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="gradectl.domain.catalog"):
            GenericItem().set_page_content(0)
        assert "Rejected page count 0" in caplog.text


class TestCatalogItem:
    def test_round_trip(self) -> None:
        item = CatalogItem(title="T", author="Au", identifier="ISBN1", page_count=200, price=9.99)
        assert item.title == "T"
        assert item.author == "Au"
        assert item.identifier == "ISBN1"
        assert item.page_count == 200
        assert item.price == Decimal("9.99")

    def test_constructor_forwards_to_base(self) -> None:
        base = RecordingBase()
        item = CatalogItem("T", "Au", "ISBN1", 200, 9.99, base=base)
        assert base.calls == [("set_page_content", 200), ("set_price", 9.99)]
        assert item.base is base

    def test_constructor_calls_setters_unconditionally(self) -> None:
        base = RecordingBase()
        CatalogItem("T", "Au", "ISBN1", -1, -1, base=base)
        assert [name for name, _ in base.calls] == ["set_page_content", "set_price"]

    def test_invalid_values_not_revalidated(self) -> None:
        item = CatalogItem("T", "Au", "ISBN1", 0, -2.5)
        assert item.page_count is None
        assert item.price is None

    def test_collaborator_policy_is_authoritative(self) -> None:
        """Whatever the base accepted is what the item reports."""
        item = CatalogItem("T", "Au", "ISBN1", -7, 1, base=RecordingBase())
        assert item.page_count == -7

    def test_bibliographic_setters(self) -> None:
        item = CatalogItem("T", "Au", "ISBN1", 200, 9.99)
        item.title = "Dune"
        item.author = "Frank Herbert"
        item.identifier = "9780441013593"
        assert (item.title, item.author, item.identifier) == (
            "Dune",
            "Frank Herbert",
            "9780441013593",
        )

    def test_forwarding_mutators(self) -> None:
        item = CatalogItem("T", "Au", "ISBN1", 200, 9.99)
        assert item.set_page_content(320) is True
        assert item.set_price("14.00") is True
        assert item.set_page_content(0) is False
        assert item.page_count == 320
        assert item.price == Decimal("14.00")

    def test_describe(self) -> None:
        item = CatalogItem("Dune", "Frank Herbert", "ISBN", 412, 9.99)
        assert item.describe() == "Dune by Frank Herbert (412 pages)"

    def test_describe_unset_pages(self) -> None:
        assert CatalogItem("T", "Au", "I", 0, 1).describe() == "T by Au (? pages)"

    def test_to_dict(self) -> None:
        item = CatalogItem("T", "Au", "ISBN1", 200, 9.99)
        assert item.to_dict() == {
            "title": "T",
            "author": "Au",
            "identifier": "ISBN1",
            "page_count": 200,
            "price": "9.99",
        }

    def test_repr(self) -> None:
        assert "ISBN1" in repr(CatalogItem("T", "Au", "ISBN1", 200, 9.99))


class TestRejectedFields:
    def test_all_accepted(self) -> None:
        assert CatalogItem("T", "Au", "I", 200, 9.99).rejected_fields() == []

    def test_both_rejected(self) -> None:
        assert CatalogItem("T", "Au", "I", 0, -1).rejected_fields() == ["page_count", "price"]

    def test_uses_setter_result_not_state(self) -> None:
        base = GenericItem()
        base.set_page_content(50)
        base.set_price(3)
        item = CatalogItem("T", "Au", "I", -1, "free", base=base)
        assert item.page_count == 50
        assert item.price == Decimal("3")
        assert item.rejected_fields() == ["page_count", "price"]

    def test_later_mutations_do_not_change_it(self) -> None:
        item = CatalogItem("T", "Au", "I", 200, 9.99)
        item.set_price(-5)
        assert item.rejected_fields() == []
