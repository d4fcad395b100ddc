"""Application service: Upload Product Image use case.

Replacing an image is delete-then-upload: the old blob is removed
first, then the new one is stored and its URL recorded on the product.
If the upload fails the product keeps pointing at its old URL; if the
final persist fails the new blob is orphaned.
"""

from __future__ import annotations

import io
import logging
from typing import BinaryIO

from catalog.application.dto import ProductDTO, to_dto
from catalog.domain.exceptions import NotFoundError
from catalog.domain.model.value_objects import ImageUpload
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.storage.image_storage import ImageStorage

logger = logging.getLogger(__name__)


class UploadProductImageHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        image_storage: ImageStorage,
    ) -> None:
        self._product_repo = product_repo
        self._image_storage = image_storage

    def handle(
        self,
        product_id: str,
        stream: BinaryIO,
        filename: str,
        content_type: str,
    ) -> ProductDTO:
        """Attach an image to a product, replacing any existing one.

        Steps:
        1. Resolve the product (fail if not found).
        2. Read and validate the upload (type and size).
        3. Delete the previous image, if any.
        4. Store the new image and persist its URL.
        """
        logger.info("Uploading image %r for product %s", filename, product_id)

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product with ID '{product_id}' not found")

        upload = ImageUpload.read(stream, filename, content_type)

        if product.image_url is not None:
            logger.info("Deleting previous image %s", product.image_url)
            self._image_storage.delete(product.image_url)

        image_url = self._image_storage.upload(
            io.BytesIO(upload.data), upload.filename, upload.content_type
        )
        product.set_image_url(image_url)
        self._product_repo.update(product)

        logger.info("Product %s image stored at %s (%d bytes)", product.id, image_url, upload.size)
        return to_dto(product)
