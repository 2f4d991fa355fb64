"""
Use case: Search products by name or description.

Input: SearchProductsQuery (term)
Output: SearchResult
Side effects: None (read-only query).
Failure cases: AppError (400) if the term is empty or missing.
"""

import logging
from http import HTTPStatus

from app.application.catalog.dtos import SearchProductsQuery, SearchResult
from app.domain.catalog.errors import AppError
from app.domain.catalog.ports import ProductRepository
from app.domain.catalog.query_engine import matches_search

logger = logging.getLogger(__name__)


class SearchProductsUseCase:
    """Matches the search term against the whole catalog, unpaginated."""

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    def execute(self, query: SearchProductsQuery) -> SearchResult:
        """Run the search use case.

        Raises:
            AppError: If no search term was supplied.
        """
        if not query.term:
            raise AppError(
                'Search query parameter "q" is required', HTTPStatus.BAD_REQUEST
            )

        results = [
            p for p in self._repository.list_all() if matches_search(p, query.term)
        ]
        logger.info("Search %r matched %d products", query.term, len(results))
        return SearchResult(query=query.term, results=results, count=len(results))
