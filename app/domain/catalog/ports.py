"""
Port interfaces (ABCs) for the catalog bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Optional

from app.domain.catalog.entities import Product


class ProductRepository(ABC):
    """Port for the ordered product collection.

    Implementations keep insertion order and unique ids. Mutations are
    atomic: a miss leaves the collection unchanged.
    """

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return a snapshot of every product in insertion order."""
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, product_id: str) -> Optional[Product]:
        """Return a product by its id, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def add(self, fields: dict[str, Any], created_at: datetime) -> Product:
        """Store a new product with a fresh id at the end of the collection."""
        raise NotImplementedError

    @abstractmethod
    def update(
        self, product_id: str, changes: dict[str, Any], updated_at: datetime
    ) -> Optional[Product]:
        """Merge ``changes`` over a product in place.

        Returns:
            The updated product, or None if the id is unknown.
        """
        raise NotImplementedError

    @abstractmethod
    def remove(self, product_id: str) -> Optional[Product]:
        """Remove a product.

        Returns:
            The removed product, or None if the id is unknown.
        """
        raise NotImplementedError

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored products."""
        raise NotImplementedError
