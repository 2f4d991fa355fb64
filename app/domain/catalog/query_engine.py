"""
Catalog query engine.

Pure functions over an ordered sequence of products: search,
filtering, pagination and aggregate statistics. Input order is
preserved everywhere; it is the natural listing order.
No framework imports, no IO.
"""

import math
import re
from typing import Iterable, Optional, Sequence

from app.domain.catalog.entities import CatalogStats, PageLink, Product, ProductPage

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def matches_search(product: Product, term: str) -> bool:
    """Case-insensitive substring match against name or description."""
    needle = term.lower()
    return needle in product.name.lower() or needle in product.description.lower()


def filter_products(
    products: Iterable[Product],
    search: Optional[str] = None,
    category: Optional[str] = None,
    in_stock: Optional[str] = None,
) -> list[Product]:
    """Apply the listing filters in order: search, category, stock state.

    Empty or missing filter values are ignored. ``in_stock`` is the raw
    query string: only the literal ``"true"`` selects in-stock products,
    any other value selects out-of-stock ones.
    """
    result = list(products)
    if search:
        result = [p for p in result if matches_search(p, search)]
    if category:
        wanted = category.lower()
        result = [p for p in result if p.category.lower() == wanted]
    if in_stock:
        flag = in_stock == "true"
        result = [p for p in result if p.in_stock == flag]
    return result


def parse_positive_int(raw: Optional[str], default: int) -> int:
    """Parse a pagination parameter, falling back to ``default``.

    Only the leading ASCII digits count, so ``"2abc"`` is 2 and ``"1.5"``
    is 1. Missing, non-numeric, zero and negative values yield the default.
    """
    if raw is None:
        return default
    match = _LEADING_INT.match(raw)
    if match is None:
        return default
    value = int(match.group(1))
    return value if value > 0 else default


def paginate(products: Sequence[Product], page: int, limit: int) -> ProductPage:
    """Slice ``products`` into the requested page.

    ``next`` is set iff more products follow the page, ``previous``
    iff the page does not start at the first product.
    """
    total = len(products)
    start = (page - 1) * limit
    end = page * limit
    return ProductPage(
        page=page,
        limit=limit,
        total=total,
        total_pages=math.ceil(total / limit),
        products=list(products[start:end]),
        next=PageLink(page=page + 1, limit=limit) if end < total else None,
        previous=PageLink(page=page - 1, limit=limit) if start > 0 else None,
    )


def compute_stats(products: Sequence[Product]) -> CatalogStats:
    """Aggregate counts per stock state and category, and the mean price."""
    categories: dict[str, int] = {}
    in_stock = 0
    for product in products:
        categories[product.category] = categories.get(product.category, 0) + 1
        if product.in_stock:
            in_stock += 1

    average_price = 0.0
    if products:
        average_price = round(sum(p.price for p in products) / len(products), 2)

    return CatalogStats(
        total_products=len(products),
        in_stock=in_stock,
        out_of_stock=len(products) - in_stock,
        categories=categories,
        average_price=average_price,
    )
