"""
Tests for the catalog application layer (use cases).

Use cases run against the in-memory repository seeded with the
demo catalog. Each test verifies orchestration and store effects.
"""

import pytest

from app.application.catalog.create_product import CreateProductUseCase
from app.application.catalog.delete_product import DeleteProductUseCase
from app.application.catalog.dtos import (
    CreateProductCommand,
    ListProductsQuery,
    SearchProductsQuery,
    UpdateProductCommand,
)
from app.application.catalog.get_product import GetProductUseCase
from app.application.catalog.get_product_stats import GetProductStatsUseCase
from app.application.catalog.list_products import ListProductsUseCase
from app.application.catalog.search_products import SearchProductsUseCase
from app.application.catalog.update_product import UpdateProductUseCase
from app.domain.catalog.errors import AppError, NotFoundError
from app.infrastructure.catalog.in_memory_product_repository import (
    InMemoryProductRepository,
)


class TestCreateAndGetProduct:
    """Tests for CreateProductUseCase and GetProductUseCase."""

    def test_created_product_can_be_fetched(
        self, seeded_repository: InMemoryProductRepository, valid_payload: dict
    ) -> None:
        created = CreateProductUseCase(seeded_repository).execute(
            CreateProductCommand(payload=valid_payload)
        )
        fetched = GetProductUseCase(seeded_repository).execute(created.id)

        assert fetched == created
        assert fetched.name == valid_payload["name"]
        assert fetched.description == valid_payload["description"]
        assert fetched.price == valid_payload["price"]
        assert fetched.category == valid_payload["category"]
        assert fetched.in_stock is valid_payload["inStock"]
        assert fetched.created_at is not None
        assert fetched.updated_at is None

    def test_create_appends_at_the_end(
        self, seeded_repository: InMemoryProductRepository, valid_payload: dict
    ) -> None:
        created = CreateProductUseCase(seeded_repository).execute(
            CreateProductCommand(payload=valid_payload)
        )
        assert [p.id for p in seeded_repository.list_all()] == ["1", "2", created.id]

    def test_client_supplied_id_is_ignored(
        self, seeded_repository: InMemoryProductRepository, valid_payload: dict
    ) -> None:
        created = CreateProductUseCase(seeded_repository).execute(
            CreateProductCommand(payload={**valid_payload, "id": "1"})
        )
        assert created.id != "1"
        assert seeded_repository.count() == 3

    def test_generated_ids_are_unique(
        self, seeded_repository: InMemoryProductRepository, valid_payload: dict
    ) -> None:
        use_case = CreateProductUseCase(seeded_repository)
        ids = {
            use_case.execute(CreateProductCommand(payload=valid_payload)).id
            for _ in range(20)
        }
        assert len(ids) == 20

    def test_get_unknown_id_raises(
        self, seeded_repository: InMemoryProductRepository
    ) -> None:
        with pytest.raises(NotFoundError):
            GetProductUseCase(seeded_repository).execute("missing")


class TestUpdateProductUseCase:
    """Tests for partial updates."""

    def test_absent_fields_are_retained(
        self, seeded_repository: InMemoryProductRepository
    ) -> None:
        before = seeded_repository.get_by_id("1")

        after = UpdateProductUseCase(seeded_repository).execute(
            UpdateProductCommand(product_id="1", payload={"price": 899.0, "inStock": False})
        )

        assert after.price == 899.0
        assert after.in_stock is False
        assert after.name == before.name
        assert after.description == before.description
        assert after.category == before.category
        assert after.created_at == before.created_at
        assert after.updated_at is not None

    def test_position_is_preserved(
        self, seeded_repository: InMemoryProductRepository
    ) -> None:
        UpdateProductUseCase(seeded_repository).execute(
            UpdateProductCommand(product_id="1", payload={"name": "Ultrabook"})
        )
        products = seeded_repository.list_all()
        assert [p.id for p in products] == ["1", "2"]
        assert products[0].name == "Ultrabook"

    def test_unknown_id_leaves_store_unchanged(
        self, seeded_repository: InMemoryProductRepository
    ) -> None:
        before = seeded_repository.list_all()
        with pytest.raises(NotFoundError):
            UpdateProductUseCase(seeded_repository).execute(
                UpdateProductCommand(product_id="nope", payload={"name": "X"})
            )
        assert seeded_repository.list_all() == before


class TestDeleteProductUseCase:
    def test_returns_removed_product(
        self, seeded_repository: InMemoryProductRepository
    ) -> None:
        removed = DeleteProductUseCase(seeded_repository).execute("2")
        assert removed.name == "Coffee Mug"
        assert seeded_repository.get_by_id("2") is None
        assert seeded_repository.count() == 1

    def test_unknown_id_leaves_store_unchanged(
        self, seeded_repository: InMemoryProductRepository
    ) -> None:
        with pytest.raises(NotFoundError):
            DeleteProductUseCase(seeded_repository).execute("nope")
        assert seeded_repository.count() == 2


class TestListProductsUseCase:
    def test_defaults(self, seeded_repository: InMemoryProductRepository) -> None:
        page = ListProductsUseCase(seeded_repository).execute(ListProductsQuery())
        assert (page.page, page.limit, page.total, page.total_pages) == (1, 10, 2, 1)
        assert page.next is None
        assert page.previous is None

    def test_category_filter_is_case_insensitive(
        self, seeded_repository: InMemoryProductRepository
    ) -> None:
        page = ListProductsUseCase(seeded_repository).execute(
            ListProductsQuery(category="kitchen")
        )
        assert [p.name for p in page.products] == ["Coffee Mug"]

    def test_invalid_pagination_falls_back_to_configured_defaults(
        self, seeded_repository: InMemoryProductRepository
    ) -> None:
        use_case = ListProductsUseCase(seeded_repository, default_page=1, default_limit=1)
        page = use_case.execute(ListProductsQuery(page="abc", limit="zero"))
        assert (page.page, page.limit, page.total_pages) == (1, 1, 2)
        assert page.next is not None


class TestSearchProductsUseCase:
    def test_matches_description(
        self, seeded_repository: InMemoryProductRepository
    ) -> None:
        result = SearchProductsUseCase(seeded_repository).execute(
            SearchProductsQuery(term="CERAMIC")
        )
        assert result.query == "CERAMIC"
        assert result.count == 1
        assert result.results[0].id == "2"

    @pytest.mark.parametrize("term", [None, ""])
    def test_missing_term_is_a_bad_request(
        self, seeded_repository: InMemoryProductRepository, term
    ) -> None:
        with pytest.raises(AppError) as exc_info:
            SearchProductsUseCase(seeded_repository).execute(SearchProductsQuery(term=term))
        assert exc_info.value.status == 400


class TestGetProductStatsUseCase:
    def test_fixture_catalog(self, seeded_repository: InMemoryProductRepository) -> None:
        stats = GetProductStatsUseCase(seeded_repository).execute()
        assert stats.total_products == 2
        assert stats.in_stock == 2
        assert stats.out_of_stock == 0
        assert stats.categories == {"Electronics": 1, "Kitchen": 1}
        assert stats.average_price == 506.49

    def test_empty_catalog(self) -> None:
        stats = GetProductStatsUseCase(InMemoryProductRepository()).execute()
        assert stats.total_products == 0
        assert stats.average_price == 0
