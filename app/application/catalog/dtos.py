"""
Data Transfer Objects for the catalog application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from app.domain.catalog.entities import Product


@dataclass(frozen=True)
class ListProductsQuery:
    """Input DTO for a filtered, paginated listing.

    Attributes:
        search: Substring matched against name or description.
        category: Category name, compared case-insensitively.
        in_stock: Raw stock flag; only ``"true"`` means in stock.
        page: Raw page number; invalid values fall back to the default.
        limit: Raw page size; invalid values fall back to the default.
    """

    search: Optional[str] = None
    category: Optional[str] = None
    in_stock: Optional[str] = None
    page: Optional[str] = None
    limit: Optional[str] = None


@dataclass(frozen=True)
class SearchProductsQuery:
    """Input DTO for an unpaginated search."""

    term: Optional[str]


@dataclass(frozen=True)
class SearchResult:
    """Output DTO for a search.

    Attributes:
        query: The term as supplied.
        results: Every matching product in catalog order.
        count: Number of matches.
    """

    query: str
    results: list[Product] = field(default_factory=list)
    count: int = 0


@dataclass(frozen=True)
class CreateProductCommand:
    """Input DTO for creating a product from an already validated payload."""

    payload: dict[str, Any]


@dataclass(frozen=True)
class UpdateProductCommand:
    """Input DTO for a partial update from an already validated payload."""

    product_id: str
    payload: dict[str, Any]
