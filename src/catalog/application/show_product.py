"""Application service: Show Product use case (query)."""

from __future__ import annotations

import logging

from catalog.application.dto import ProductDTO, to_dto
from catalog.domain.exceptions import NotFoundError
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            logger.info("Product %s not found", product_id)
            raise NotFoundError(f"Product with ID '{product_id}' not found")
        return to_dto(product)
