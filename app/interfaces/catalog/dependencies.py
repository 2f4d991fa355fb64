"""
Dependency injection for the catalog bounded context.

Provides FastAPI dependency functions that wire the shared product
repository into use cases, plus the request-body stages of the write
pipeline: JSON reading and the create/update validation gates.
"""

import json
from http import HTTPStatus
from typing import Any

from fastapi import Depends, Request

from app.application.catalog.create_product import CreateProductUseCase
from app.application.catalog.delete_product import DeleteProductUseCase
from app.application.catalog.get_product import GetProductUseCase
from app.application.catalog.get_product_stats import GetProductStatsUseCase
from app.application.catalog.list_products import ListProductsUseCase
from app.application.catalog.search_products import SearchProductsUseCase
from app.application.catalog.update_product import UpdateProductUseCase
from app.core.config import settings
from app.domain.catalog.errors import AppError
from app.domain.catalog.ports import ProductRepository
from app.domain.catalog.validation import validate_create, validate_update


def get_product_repository(request: Request) -> ProductRepository:
    """Return the process-wide repository created by the app factory."""
    return request.app.state.product_repository


def get_list_products_use_case(
    repository: ProductRepository = Depends(get_product_repository),
) -> ListProductsUseCase:
    """Build ListProductsUseCase with the configured pagination defaults."""
    return ListProductsUseCase(
        repository,
        default_page=settings.default_page,
        default_limit=settings.default_limit,
    )


def get_search_products_use_case(
    repository: ProductRepository = Depends(get_product_repository),
) -> SearchProductsUseCase:
    return SearchProductsUseCase(repository)


def get_product_stats_use_case(
    repository: ProductRepository = Depends(get_product_repository),
) -> GetProductStatsUseCase:
    return GetProductStatsUseCase(repository)


def get_product_use_case(
    repository: ProductRepository = Depends(get_product_repository),
) -> GetProductUseCase:
    return GetProductUseCase(repository)


def get_create_product_use_case(
    repository: ProductRepository = Depends(get_product_repository),
) -> CreateProductUseCase:
    return CreateProductUseCase(repository)


def get_update_product_use_case(
    repository: ProductRepository = Depends(get_product_repository),
) -> UpdateProductUseCase:
    return UpdateProductUseCase(repository)


def get_delete_product_use_case(
    repository: ProductRepository = Depends(get_product_repository),
) -> DeleteProductUseCase:
    return DeleteProductUseCase(repository)


async def read_json_body(request: Request) -> dict[str, Any]:
    """Read the request body as an untyped JSON object.

    An empty body reads as ``{}`` so that validation reports every
    missing field.

    Raises:
        AppError: If the body is not valid JSON or not a JSON object.
    """
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except ValueError as exc:
        raise AppError("Malformed JSON request body", HTTPStatus.BAD_REQUEST) from exc
    if not isinstance(payload, dict):
        raise AppError("Request body must be a JSON object", HTTPStatus.BAD_REQUEST)
    return payload


async def validated_create_payload(
    payload: dict[str, Any] = Depends(read_json_body),
) -> dict[str, Any]:
    """Validation gate for creation: every field is required."""
    validate_create(payload)
    return payload


async def validated_update_payload(
    payload: dict[str, Any] = Depends(read_json_body),
) -> dict[str, Any]:
    """Validation gate for updates: only supplied fields are checked."""
    validate_update(payload)
    return payload
