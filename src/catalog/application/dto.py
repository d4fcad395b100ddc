"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from catalog.domain.model.product import Product
from catalog.domain.model.query import Page


@dataclass(frozen=True)
class ProductSpec:
    """Input: the descriptive fields of a product, as entered by the user."""

    name: str
    description: str
    price: str | int | float | Decimal
    category: str


@dataclass(frozen=True)
class ProductDTO:
    """Output: a single product as displayed to the user."""

    id: str
    name: str
    description: str
    price: str  # formatted, e.g. "$15.00"
    category: str
    status: str
    image_url: str | None
    created_at: str
    updated_at: str


@dataclass(frozen=True)
class ProductPageDTO:
    """Output: one page of products plus what a client needs to page through."""

    items: list[ProductDTO]
    total_count: int
    page_number: int
    page_size: int
    total_pages: int


def to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        description=product.description,
        price=str(product.price),
        category=product.category,
        status=product.status.value,
        image_url=product.image_url,
        created_at=product.created_at.isoformat(),
        updated_at=product.updated_at.isoformat(),
    )


def to_page_dto(page: Page) -> ProductPageDTO:
    return ProductPageDTO(
        items=[to_dto(p) for p in page.items],
        total_count=page.total_count,
        page_number=page.page_number,
        page_size=page.page_size,
        total_pages=page.total_pages,
    )
