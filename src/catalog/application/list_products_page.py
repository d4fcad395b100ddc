"""Application service: List Products Page use case (query)."""

from __future__ import annotations

import logging

from catalog.application.dto import ProductPageDTO, to_page_dto
from catalog.domain.model.query import validate_page_request
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ListProductsPageHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, page_number: int, page_size: int) -> ProductPageDTO:
        """Return page *page_number* (1-based) of *page_size* products."""
        validate_page_request(page_number, page_size)
        page = self._product_repo.get_paged(page_number, page_size)
        logger.info(
            "Page %d/%d: %d of %d products",
            page.page_number,
            page.total_pages,
            len(page.items),
            page.total_count,
        )
        return to_page_dto(page)
