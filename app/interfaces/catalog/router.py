"""
FastAPI routers for the catalog bounded context.

All routes delegate to use cases. No business logic here.
Read routes are public. Write routes use ``ApiKeyProtectedRoute``,
so the pipeline for a write is: API key gate, validation gate
(create/update dependencies), use case. Errors raised on the way are
rendered by the centralized error handlers.
"""

from typing import Any, Optional

from fastapi import APIRouter, Depends, Query, Request

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
from app.core.config import settings
from app.interfaces.catalog.dependencies import (
    get_create_product_use_case,
    get_delete_product_use_case,
    get_list_products_use_case,
    get_product_stats_use_case,
    get_product_use_case,
    get_search_products_use_case,
    get_update_product_use_case,
    validated_create_payload,
    validated_update_payload,
)
from app.interfaces.catalog.schemas import (
    AuthErrorResponse,
    CatalogStatsSchema,
    ErrorResponse,
    ProductPageSchema,
    ProductSchema,
    SearchResultSchema,
    SuccessResponse,
)
from app.shared.security.api_key import ApiKeyProtectedRoute
from app.shared.security.rate_limiting import limiter

router = APIRouter(prefix="/products", tags=["products"])
protected_router = APIRouter(
    prefix="/products",
    tags=["products"],
    route_class=ApiKeyProtectedRoute,
    responses={
        401: {"model": AuthErrorResponse},
        403: {"model": AuthErrorResponse},
        429: {"model": ErrorResponse},
    },
)


@router.get(
    "",
    response_model=SuccessResponse[ProductPageSchema],
    response_model_exclude_none=True,
    summary="List products",
    description="Filter by search term, category and stock state, then paginate.",
)
async def list_products(
    search: Optional[str] = None,
    category: Optional[str] = None,
    in_stock: Optional[str] = Query(default=None, alias="inStock"),
    page: Optional[str] = None,
    limit: Optional[str] = None,
    use_case: ListProductsUseCase = Depends(get_list_products_use_case),
) -> SuccessResponse[ProductPageSchema]:
    """List products, filtered and paginated."""
    query = ListProductsQuery(
        search=search,
        category=category,
        in_stock=in_stock,
        page=page,
        limit=limit,
    )
    result = use_case.execute(query)
    return SuccessResponse(data=ProductPageSchema.from_entity(result))


@router.get(
    "/search",
    response_model=SuccessResponse[SearchResultSchema],
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}},
    summary="Search products",
    description="Match a term against product names and descriptions.",
)
async def search_products(
    q: Optional[str] = None,
    use_case: SearchProductsUseCase = Depends(get_search_products_use_case),
) -> SuccessResponse[SearchResultSchema]:
    """Search the whole catalog without pagination."""
    result = use_case.execute(SearchProductsQuery(term=q))
    return SuccessResponse(data=SearchResultSchema.from_result(result))


@router.get(
    "/stats",
    response_model=SuccessResponse[CatalogStatsSchema],
    response_model_exclude_none=True,
    summary="Catalog statistics",
)
async def product_stats(
    use_case: GetProductStatsUseCase = Depends(get_product_stats_use_case),
) -> SuccessResponse[CatalogStatsSchema]:
    """Return stock, category and price statistics."""
    return SuccessResponse(data=CatalogStatsSchema.from_entity(use_case.execute()))


@router.get(
    "/{product_id}",
    response_model=SuccessResponse[ProductSchema],
    response_model_exclude_none=True,
    responses={404: {"model": ErrorResponse}},
    summary="Get a product",
)
async def get_product(
    product_id: str,
    use_case: GetProductUseCase = Depends(get_product_use_case),
) -> SuccessResponse[ProductSchema]:
    """Return a single product by id."""
    return SuccessResponse(data=ProductSchema.from_entity(use_case.execute(product_id)))


@protected_router.post(
    "",
    status_code=201,
    response_model=SuccessResponse[ProductSchema],
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}},
    summary="Create a product",
)
@limiter.limit(settings.rate_limit_write)
async def create_product(
    request: Request,
    payload: dict[str, Any] = Depends(validated_create_payload),
    use_case: CreateProductUseCase = Depends(get_create_product_use_case),
) -> SuccessResponse[ProductSchema]:
    """Create a product. Requires the API key."""
    product = use_case.execute(CreateProductCommand(payload=payload))
    return SuccessResponse(
        message="Product created successfully",
        data=ProductSchema.from_entity(product),
    )


@protected_router.put(
    "/{product_id}",
    response_model=SuccessResponse[ProductSchema],
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Update a product",
)
@limiter.limit(settings.rate_limit_write)
async def update_product(
    request: Request,
    product_id: str,
    payload: dict[str, Any] = Depends(validated_update_payload),
    use_case: UpdateProductUseCase = Depends(get_update_product_use_case),
) -> SuccessResponse[ProductSchema]:
    """Partially update a product. Requires the API key."""
    product = use_case.execute(
        UpdateProductCommand(product_id=product_id, payload=payload)
    )
    return SuccessResponse(
        message="Product updated successfully",
        data=ProductSchema.from_entity(product),
    )


@protected_router.delete(
    "/{product_id}",
    response_model=SuccessResponse[ProductSchema],
    response_model_exclude_none=True,
    responses={404: {"model": ErrorResponse}},
    summary="Delete a product",
)
@limiter.limit(settings.rate_limit_write)
async def delete_product(
    request: Request,
    product_id: str,
    use_case: DeleteProductUseCase = Depends(get_delete_product_use_case),
) -> SuccessResponse[ProductSchema]:
    """Delete a product and return it. Requires the API key."""
    product = use_case.execute(product_id)
    return SuccessResponse(
        message="Product deleted successfully",
        data=ProductSchema.from_entity(product),
    )
