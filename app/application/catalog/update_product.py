"""
Use case: Partially update a product.

Input: UpdateProductCommand (id, validated partial payload)
Output: Product
Side effects: Replaces the product in place, keeping its position.
Failure cases: NotFoundError if the id is unknown (catalog unchanged).
"""

import logging
from datetime import datetime, timezone

from app.application.catalog.dtos import UpdateProductCommand
from app.domain.catalog.entities import Product
from app.domain.catalog.errors import NotFoundError
from app.domain.catalog.ports import ProductRepository
from app.domain.catalog.validation import extract_fields

logger = logging.getLogger(__name__)


class UpdateProductUseCase:
    """Shallow-merges the supplied fields over an existing product."""

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    def execute(self, command: UpdateProductCommand) -> Product:
        """Run the update product use case.

        Raises:
            NotFoundError: If no product has this id.
        """
        changes = extract_fields(command.payload)
        product = self._repository.update(
            command.product_id,
            changes,
            updated_at=datetime.now(timezone.utc),
        )
        if product is None:
            raise NotFoundError("Product")
        logger.info(
            "Product updated: id=%s, fields=%s", product.id, sorted(changes)
        )
        return product
