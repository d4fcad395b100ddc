"""Application service: Search Products use case (query).

Naive case-insensitive substring match over name, description and
category. A blank term matches everything.
"""

from __future__ import annotations

import logging

from catalog.application.dto import ProductDTO, to_dto
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


def _matches(product: Product, term: str) -> bool:
    return any(
        term in field.casefold()
        for field in (product.name, product.description, product.category)
    )


class SearchProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, term: str) -> list[ProductDTO]:
        needle = (term or "").strip().casefold()
        results = [
            p for p in self._product_repo.list_all() if _matches(p, needle)
        ]
        logger.info("Search for %r returned %d products", term, len(results))
        return [to_dto(p) for p in results]
