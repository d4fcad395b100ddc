"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (SQLite, in-memory)
live in the infrastructure layer and in the test fakes.

Soft-deleted products are invisible to every read unless the caller
explicitly asks for them with ``include_deleted=True``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import Product
from catalog.domain.model.query import Page, ProductFilter


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str, include_deleted: bool = False) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self, include_deleted: bool = False) -> list[Product]:
        """Return every product in the catalog, in storage order."""

    @abstractmethod
    def get_filtered(self, criteria: ProductFilter) -> list[Product]:
        """Return the products matching every constraint set on *criteria*."""

    @abstractmethod
    def get_paged(self, page_number: int, page_size: int) -> Page:
        """Return one 1-based page of products plus the total count."""

    @abstractmethod
    def add(self, product: Product) -> Product:
        """Persist a new product and return it as stored."""

    @abstractmethod
    def update(self, product: Product) -> None:
        """Persist changes to an existing product."""

    @abstractmethod
    def delete(self, product_id: str) -> None:
        """Soft-delete a product by stamping its ``deleted_at``."""

    @abstractmethod
    def exists(self, product_id: str) -> bool:
        """Return True if a non-deleted product with this ID exists."""
