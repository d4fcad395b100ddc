"""Application service: Delete Product use case.

The product's image (if any) is removed from the image store *before*
the record is soft-deleted. Image cleanup is best-effort: a storage
failure is logged and never prevents the record from being deleted.
"""

from __future__ import annotations

import logging

from catalog.domain.exceptions import NotFoundError, StorageError
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.storage.image_storage import ImageStorage

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        image_storage: ImageStorage,
    ) -> None:
        self._product_repo = product_repo
        self._image_storage = image_storage

    def handle(self, product_id: str) -> None:
        if not self._product_repo.exists(product_id):
            logger.info("Cannot delete missing product %s", product_id)
            raise NotFoundError(f"Product with ID '{product_id}' not found")

        product = self._product_repo.get_by_id(product_id)
        if product is not None and product.image_url is not None:
            self._discard_image(product.image_url)

        self._product_repo.delete(product_id)
        logger.info("Deleted product %s", product_id)

    def _discard_image(self, image_url: str) -> None:
        try:
            removed = self._image_storage.delete(image_url)
        except StorageError:
            logger.warning("Failed to delete image %s", image_url, exc_info=True)
            return
        if not removed:
            logger.info("Image %s was already gone", image_url)
