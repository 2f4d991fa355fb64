"""
Pydantic schemas for catalog API responses.

These schemas define the API contract: the success envelope and
the camelCase product representation. Request bodies are validated
by the catalog field rules, not here.
No business logic belongs here.
"""

from datetime import datetime
from typing import Generic, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.application.catalog.dtos import SearchResult
from app.domain.catalog.entities import CatalogStats, PageLink, Product, ProductPage

DataT = TypeVar("DataT")


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductSchema(CamelModel):
    """A product as exposed by the API."""

    id: str
    name: str
    description: str
    price: Union[int, float]
    category: str
    in_stock: bool
    created_at: datetime
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, product: Product) -> "ProductSchema":
        return cls(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price,
            category=product.category,
            in_stock=product.in_stock,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class PageLinkSchema(CamelModel):
    """Neighbouring page descriptor."""

    page: int
    limit: int

    @classmethod
    def from_entity(cls, link: Optional[PageLink]) -> Optional["PageLinkSchema"]:
        if link is None:
            return None
        return cls(page=link.page, limit=link.limit)


class ProductPageSchema(CamelModel):
    """One page of a product listing."""

    page: int
    limit: int
    total: int
    total_pages: int
    next: Optional[PageLinkSchema] = None
    previous: Optional[PageLinkSchema] = None
    products: list[ProductSchema]

    @classmethod
    def from_entity(cls, page: ProductPage) -> "ProductPageSchema":
        return cls(
            page=page.page,
            limit=page.limit,
            total=page.total,
            total_pages=page.total_pages,
            next=PageLinkSchema.from_entity(page.next),
            previous=PageLinkSchema.from_entity(page.previous),
            products=[ProductSchema.from_entity(p) for p in page.products],
        )


class SearchResultSchema(CamelModel):
    """Unpaginated search result."""

    query: str
    results: list[ProductSchema]
    count: int

    @classmethod
    def from_result(cls, result: SearchResult) -> "SearchResultSchema":
        return cls(
            query=result.query,
            results=[ProductSchema.from_entity(p) for p in result.results],
            count=result.count,
        )


class CatalogStatsSchema(CamelModel):
    """Aggregate catalog statistics."""

    total_products: int
    in_stock: int
    out_of_stock: int
    categories: dict[str, int]
    average_price: float

    @classmethod
    def from_entity(cls, stats: CatalogStats) -> "CatalogStatsSchema":
        return cls(
            total_products=stats.total_products,
            in_stock=stats.in_stock,
            out_of_stock=stats.out_of_stock,
            categories=stats.categories,
            average_price=stats.average_price,
        )


class SuccessResponse(BaseModel, Generic[DataT]):
    """Success envelope shared by every catalog endpoint."""

    success: bool = True
    message: Optional[str] = None
    data: DataT


class ErrorResponse(BaseModel):
    """Failure envelope rendered by the centralized error handlers."""

    success: bool = False
    error: str
    details: Optional[list[str]] = None
    timestamp: str


class AuthErrorResponse(BaseModel):
    """Rejection body produced by the API key gate."""

    error: str
    message: str


class WelcomeResponse(BaseModel):
    """Response schema for the root endpoint."""

    message: str
    timestamp: str


class HealthResponse(BaseModel):
    """Response schema for health check endpoint."""

    status: str
    version: str
