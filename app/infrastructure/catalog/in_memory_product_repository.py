"""
In-memory product repository.

Implements the ProductRepository port with a process-local list.
Contents are seeded at startup and lost on restart.
"""

import logging
import threading
from datetime import datetime, timezone
from typing import Any, Iterable, Optional
from uuid import uuid4

from app.domain.catalog.entities import Product
from app.domain.catalog.ports import ProductRepository

logger = logging.getLogger(__name__)

SEED_PRODUCTS: tuple[dict[str, Any], ...] = (
    {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance laptop for developers",
        "price": 999.99,
        "category": "Electronics",
        "in_stock": True,
    },
    {
        "id": "2",
        "name": "Coffee Mug",
        "description": "Ceramic coffee mug with company logo",
        "price": 12.99,
        "category": "Kitchen",
        "in_stock": True,
    },
)


class InMemoryProductRepository(ProductRepository):
    """Ordered product list guarded by a lock.

    Every read-modify-write happens under the lock, so the collection
    stays consistent even when handlers run in a worker thread.
    """

    def __init__(self, products: Optional[Iterable[Product]] = None) -> None:
        self._products: list[Product] = list(products or [])
        self._lock = threading.Lock()

    @classmethod
    def with_fixtures(cls) -> "InMemoryProductRepository":
        """Build a repository holding the demo catalog."""
        seeded_at = datetime.now(timezone.utc)
        repo = cls(Product(**record, created_at=seeded_at) for record in SEED_PRODUCTS)
        logger.info("Seeded catalog with %d products", repo.count())
        return repo

    def list_all(self) -> list[Product]:
        with self._lock:
            return list(self._products)

    def get_by_id(self, product_id: str) -> Optional[Product]:
        with self._lock:
            index = self._index_of(product_id)
            return None if index is None else self._products[index]

    def add(self, fields: dict[str, Any], created_at: datetime) -> Product:
        product = Product(id=str(uuid4()), created_at=created_at, **fields)
        with self._lock:
            self._products.append(product)
        return product

    def update(
        self, product_id: str, changes: dict[str, Any], updated_at: datetime
    ) -> Optional[Product]:
        with self._lock:
            index = self._index_of(product_id)
            if index is None:
                return None
            product = self._products[index].merged(changes, updated_at)
            self._products[index] = product
            return product

    def remove(self, product_id: str) -> Optional[Product]:
        with self._lock:
            index = self._index_of(product_id)
            if index is None:
                return None
            return self._products.pop(index)

    def count(self) -> int:
        with self._lock:
            return len(self._products)

    def _index_of(self, product_id: str) -> Optional[int]:
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        return None
