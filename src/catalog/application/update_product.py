"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from catalog.application.dto import ProductDTO, ProductSpec, to_dto
from catalog.domain.exceptions import NotFoundError
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, spec: ProductSpec) -> ProductDTO:
        """Replace a product's descriptive fields.

        Status is not touched here; use the activate/deactivate use cases.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            logger.info("Cannot update missing product %s", product_id)
            raise NotFoundError(f"Product with ID '{product_id}' not found")

        product.update(
            name=spec.name,
            description=spec.description,
            price=spec.price,
            category=spec.category,
        )
        self._product_repo.update(product)
        logger.info("Updated product %s (%s)", product.id, product.name)
        return to_dto(product)
