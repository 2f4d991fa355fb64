"""
Use case: List products with filters and pagination.

Input: ListProductsQuery (search, category, in_stock, page, limit)
Output: ProductPage
Side effects: None (read-only query).
Failure cases: None. Invalid pagination values fall back to defaults.
"""

import logging

from app.application.catalog.dtos import ListProductsQuery
from app.domain.catalog.entities import ProductPage
from app.domain.catalog.ports import ProductRepository
from app.domain.catalog.query_engine import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    filter_products,
    paginate,
    parse_positive_int,
)

logger = logging.getLogger(__name__)


class ListProductsUseCase:
    """Orchestrates filtering and paginating the catalog."""

    def __init__(
        self,
        repository: ProductRepository,
        default_page: int = DEFAULT_PAGE,
        default_limit: int = DEFAULT_LIMIT,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: The product collection.
            default_page: Page used when none (or an invalid one) is given.
            default_limit: Page size used when none (or an invalid one) is given.
        """
        self._repository = repository
        self._default_page = default_page
        self._default_limit = default_limit

    def execute(self, query: ListProductsQuery) -> ProductPage:
        """Run the list products use case."""
        page = parse_positive_int(query.page, self._default_page)
        limit = parse_positive_int(query.limit, self._default_limit)

        filtered = filter_products(
            self._repository.list_all(),
            search=query.search,
            category=query.category,
            in_stock=query.in_stock,
        )
        logger.info(
            "Listing products: matched=%d, page=%d, limit=%d",
            len(filtered),
            page,
            limit,
        )
        return paginate(filtered, page, limit)
