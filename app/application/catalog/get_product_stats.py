"""
Use case: Compute catalog statistics.

Input: None
Output: CatalogStats
Side effects: None (read-only query).
Failure cases: None. An empty catalog yields zero counts and price.
"""

from app.domain.catalog.entities import CatalogStats
from app.domain.catalog.ports import ProductRepository
from app.domain.catalog.query_engine import compute_stats


class GetProductStatsUseCase:
    """Aggregates stock, category and price statistics."""

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    def execute(self) -> CatalogStats:
        """Run the statistics use case."""
        return compute_stats(self._repository.list_all())
