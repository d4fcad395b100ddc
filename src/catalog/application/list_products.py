"""Application service: List Products use case (query).

Without criteria this lists the whole catalog; otherwise the
repository composes the filter.
"""

from __future__ import annotations

import logging

from catalog.application.dto import ProductDTO, to_dto
from catalog.domain.model.query import ProductFilter
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, criteria: ProductFilter | None = None) -> list[ProductDTO]:
        if criteria is None or criteria.is_empty:
            products = self._product_repo.list_all()
        else:
            logger.info("Filtering products by %s", criteria)
            products = self._product_repo.get_filtered(criteria)

        logger.info("Found %d products", len(products))
        return [to_dto(p) for p in products]
