"""
Use case: Delete a product.

Input: product id
Output: the removed Product
Side effects: Removes the product from the catalog.
Failure cases: NotFoundError if the id is unknown (catalog unchanged).
"""

import logging

from app.domain.catalog.entities import Product
from app.domain.catalog.errors import NotFoundError
from app.domain.catalog.ports import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductUseCase:
    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    def execute(self, product_id: str) -> Product:
        product = self._repository.remove(product_id)
        if product is None:
            raise NotFoundError("Product")
        logger.info("Product deleted: id=%s", product.id)
        return product
