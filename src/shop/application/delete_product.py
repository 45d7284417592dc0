"""Application service: Delete Product use case.

Carts may still reference a deleted product; order placement reports
that as ``ProductGoneError``.
"""

from __future__ import annotations

import logging

from shop.domain.exceptions import EntityNotFoundError
from shop.domain.model.value_objects import parse_product_id
from shop.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> None:
        if not self._product_repo.delete(parse_product_id(product_id)):
            raise EntityNotFoundError("Product not found")
        logger.info("Product %s deleted", product_id)
