"""Application service: Add Product use case."""

from __future__ import annotations

import logging
from decimal import Decimal

from shop.application.dto import ProductDTO
from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money
from shop.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        price: str | int | Decimal,
        stock: int,
        description: str,
    ) -> ProductDTO:
        """Add a new product to the catalog."""
        product = Product.create(
            name=name,
            price=Money.of(price),
            stock=stock,
            description=description,
        )
        self._product_repo.save(product)
        logger.info("Product %s '%s' added", product.id, product.name)
        return ProductDTO.from_domain(product)
