"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from catalog.application.dto import ProductDTO, ProductSpec, to_dto
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, spec: ProductSpec) -> ProductDTO:
        """Add a new product to the catalog.

        The aggregate validates every field; a ValidationError leaves the
        repository untouched.
        """
        logger.info("Creating product %r", spec.name)
        product = Product.create(
            name=spec.name,
            description=spec.description,
            price=spec.price,
            category=spec.category,
        )
        created = self._product_repo.add(product)
        logger.info("Created product %s (%s)", created.id, created.name)
        return to_dto(created)
