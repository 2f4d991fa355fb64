"""
Use case: Create a product.

Input: CreateProductCommand (validated payload)
Output: Product
Side effects: Appends the product to the catalog.
Failure cases: None. The payload is validated upstream.
"""

import logging
from datetime import datetime, timezone

from app.application.catalog.dtos import CreateProductCommand
from app.domain.catalog.entities import Product
from app.domain.catalog.ports import ProductRepository
from app.domain.catalog.validation import extract_fields

logger = logging.getLogger(__name__)


class CreateProductUseCase:
    """Stores a new product with a server-generated id and timestamp."""

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    def execute(self, command: CreateProductCommand) -> Product:
        """Run the create product use case."""
        product = self._repository.add(
            extract_fields(command.payload),
            created_at=datetime.now(timezone.utc),
        )
        logger.info("Product created: id=%s, name=%s", product.id, product.name)
        return product
