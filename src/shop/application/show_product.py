"""Application service: Show Product use case (query)."""

from __future__ import annotations

from shop.application.dto import ProductDTO
from shop.domain.exceptions import EntityNotFoundError
from shop.domain.model.value_objects import parse_product_id
from shop.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> ProductDTO:
        product = self._product_repo.get_by_id(parse_product_id(product_id))
        if product is None:
            raise EntityNotFoundError("Product not found")
        return ProductDTO.from_domain(product)
