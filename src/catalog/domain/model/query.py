"""Query objects for reading the catalog: filter criteria and result pages."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product, ProductStatus


@dataclass(frozen=True)
class ProductFilter:
    """Conjunctive filter over independently optional fields.

    A field left as None places no constraint on that dimension.
    Category matches case-insensitively; price bounds are inclusive.
    """

    category: str | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    status: ProductStatus | None = None

    @property
    def is_empty(self) -> bool:
        return (
            not self.category
            and self.min_price is None
            and self.max_price is None
            and self.status is None
        )

    def matches(self, product: Product) -> bool:
        if self.category and product.category.casefold() != self.category.casefold():
            return False
        if self.min_price is not None and product.price.amount < self.min_price:
            return False
        if self.max_price is not None and product.price.amount > self.max_price:
            return False
        if self.status is not None and product.status != self.status:
            return False
        return True


def validate_page_request(page_number: int, page_size: int) -> None:
    """Raise ValidationError unless both values are positive integers."""
    if page_number < 1:
        raise ValidationError("Page number must be at least 1")
    if page_size < 1:
        raise ValidationError("Page size must be at least 1")


@dataclass(frozen=True)
class Page:
    """One page of results plus the total count of matching products."""

    items: list[Product] = field(default_factory=list)
    total_count: int = 0
    page_number: int = 1
    page_size: int = 10

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.page_size

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size) if self.page_size else 0

    @property
    def has_next(self) -> bool:
        return self.page_number < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page_number > 1
