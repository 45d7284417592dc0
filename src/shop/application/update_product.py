"""Application service: Update Product use case."""

from __future__ import annotations

from decimal import Decimal

from shop.application.dto import ProductDTO
from shop.domain.exceptions import EntityNotFoundError
from shop.domain.model.value_objects import Money, parse_product_id
from shop.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        *,
        name: str | None = None,
        price: str | int | Decimal | None = None,
        stock: int | None = None,
        description: str | None = None,
    ) -> ProductDTO:
        """Change only the supplied fields of a product.

        This does NOT affect any existing orders; they captured a
        price and name snapshot at creation time.
        """
        product = self._product_repo.get_by_id(parse_product_id(product_id))
        if product is None:
            raise EntityNotFoundError("Product not found")

        product.update(
            name=name,
            price=None if price is None else Money.of(price),
            stock=stock,
            description=description,
        )
        self._product_repo.save(product)
        return ProductDTO.from_domain(product)
