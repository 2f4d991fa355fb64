"""
Use case: Retrieve a single product.

Input: product id
Output: Product
Side effects: None (read-only query).
Failure cases: NotFoundError if the id is unknown.
"""

from app.domain.catalog.entities import Product
from app.domain.catalog.errors import NotFoundError
from app.domain.catalog.ports import ProductRepository


class GetProductUseCase:
    """Looks a product up by its exact id."""

    def __init__(self, repository: ProductRepository) -> None:
        self._repository = repository

    def execute(self, product_id: str) -> Product:
        """Run the get product use case.

        Raises:
            NotFoundError: If no product has this id.
        """
        product = self._repository.get_by_id(product_id)
        if product is None:
            raise NotFoundError("Product")
        return product
