"""Application service: Show Cart use case (query).

A user without a cart gets an empty view; no cart is created.
"""

from __future__ import annotations

from shop.application.cart_view import build_cart_view
from shop.application.dto import CartDTO
from shop.domain.repository.cart_repository import CartRepository
from shop.domain.repository.product_repository import ProductRepository


class ShowCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, user_id: str) -> CartDTO:
        cart = self._cart_repo.get_by_user(user_id)
        return build_cart_view(user_id, cart, self._product_repo)
