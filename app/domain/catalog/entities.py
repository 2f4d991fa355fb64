"""
Domain entities for the catalog bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Optional


@dataclass(frozen=True)
class Product:
    """A single catalog record.

    ``id`` is assigned by the store and never changes.
    ``updated_at`` stays ``None`` until the first successful update.
    """

    id: str
    name: str
    description: str
    price: float
    category: str
    in_stock: bool
    created_at: datetime
    updated_at: Optional[datetime] = None

    def merged(self, changes: dict[str, Any], updated_at: datetime) -> "Product":
        """Return a copy with ``changes`` applied over this record.

        Identity and creation time are never overwritten.
        """
        safe = {
            key: value
            for key, value in changes.items()
            if key not in ("id", "created_at", "updated_at")
        }
        return replace(self, **safe, updated_at=updated_at)


@dataclass(frozen=True)
class PageLink:
    """Descriptor of a neighbouring page."""

    page: int
    limit: int


@dataclass(frozen=True)
class ProductPage:
    """One page of a filtered product listing."""

    page: int
    limit: int
    total: int
    total_pages: int
    products: list[Product] = field(default_factory=list)
    next: Optional[PageLink] = None
    previous: Optional[PageLink] = None


@dataclass(frozen=True)
class CatalogStats:
    """Aggregate statistics over the whole catalog."""

    total_products: int
    in_stock: int
    out_of_stock: int
    categories: dict[str, int]
    average_price: float
