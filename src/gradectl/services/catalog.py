"""CatalogService — build and describe catalog records."""

from __future__ import annotations

from decimal import Decimal

from gradectl.domain.catalog import CatalogItem, PagedPricedItem
from gradectl.services.base import BaseService
from gradectl.services.result import ServiceError, ServiceResult


class CatalogService(BaseService):
    """Catalog operations returning ServiceResult.

    Nothing is persisted; the service reports what the page/price
    collaborator accepted so callers can show rejected values.
    """

    def register_item(
        self,
        title: str,
        author: str,
        identifier: str,
        page_count: int,
        price: Decimal | float | int | str,
        *,
        base: PagedPricedItem | None = None,
    ) -> ServiceResult:
        missing = [
            name
            for name, value in (("title", title), ("author", author), ("identifier", identifier))
            if not value.strip()
        ]
        if missing:
            return ServiceResult(
                ok=False,
                op="catalog_item",
                error=ServiceError(
                    code="VALIDATION",
                    message=f"Missing required field(s): {', '.join(missing)}",
                    detail={"fields": missing},
                ),
            )

        item = CatalogItem(title, author, identifier, page_count, price, base=base)

        rejected = item.rejected_fields()
        warnings: list[str] = []
        if "page_count" in rejected:
            warnings.append(f"Page count {page_count!r} rejected (must be > 0)")
        if "price" in rejected:
            warnings.append(f"Price {price!r} rejected (must be >= 0)")

        data = item.to_dict()
        data["summary"] = item.describe()
        return ServiceResult(ok=True, op="catalog_item", data=data, warnings=warnings)
