"""Application service: Activate / Deactivate Product use cases.

Both transitions are total and idempotent; the only failure is a
missing product.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from catalog.application.dto import ProductDTO, to_dto
from catalog.domain.exceptions import NotFoundError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class _ChangeStatusHandler(ABC):

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product with ID '{product_id}' not found")

        self._transition(product)
        self._product_repo.update(product)
        logger.info("Product %s is now %s", product.id, product.status.value)
        return to_dto(product)

    @abstractmethod
    def _transition(self, product: Product) -> None:
        """Apply the status change to *product*."""


class ActivateProductHandler(_ChangeStatusHandler):

    def _transition(self, product: Product) -> None:
        product.activate()


class DeactivateProductHandler(_ChangeStatusHandler):

    def _transition(self, product: Product) -> None:
        product.deactivate()
