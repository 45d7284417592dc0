"""Application service: List Products use case (query).

Case-insensitive substring search on the name, newest first, paged by
``page`` (1-based) and ``limit``.
"""

from __future__ import annotations

import math

from shop.application.dto import PaginationDTO, ProductDTO, ProductPageDTO
from shop.domain.exceptions import ValidationError
from shop.domain.repository.product_repository import ProductRepository

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
        search: str = "",
    ) -> ProductPageDTO:
        if page < 1:
            raise ValidationError("Page must be a positive integer")
        if not 1 <= limit <= MAX_LIMIT:
            raise ValidationError(f"Limit must be between 1 and {MAX_LIMIT}")

        needle = search.strip().lower()
        products = [
            p for p in self._product_repo.list_all()
            if not needle or needle in p.name.lower()
        ]
        products.sort(key=lambda p: p.created_at, reverse=True)

        offset = (page - 1) * limit
        total_items = len(products)
        return ProductPageDTO(
            products=[ProductDTO.from_domain(p) for p in products[offset:offset + limit]],
            pagination=PaginationDTO(
                page=page,
                limit=limit,
                total_items=total_items,
                total_pages=math.ceil(total_items / limit),
            ),
        )
