"""Application service: Get Product Image use case (query)."""

from __future__ import annotations

from typing import BinaryIO

from catalog.domain.exceptions import NotFoundError
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.storage.image_storage import ImageStorage


class GetProductImageHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        image_storage: ImageStorage,
    ) -> None:
        self._product_repo = product_repo
        self._image_storage = image_storage

    def handle(self, product_id: str) -> BinaryIO:
        """Open the product's image for reading. The caller closes the stream."""
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product with ID '{product_id}' not found")
        if product.image_url is None:
            raise NotFoundError(f"Product '{product_id}' has no image")
        return self._image_storage.get(product.image_url)
