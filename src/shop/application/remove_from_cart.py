"""Application service: Remove From Cart use case."""

from __future__ import annotations

from shop.application.cart_view import build_cart_view
from shop.application.dto import CartDTO
from shop.domain.exceptions import EntityNotFoundError
from shop.domain.model.value_objects import parse_product_id
from shop.domain.repository.cart_repository import CartRepository
from shop.domain.repository.product_repository import ProductRepository


class RemoveFromCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, user_id: str, product_id: str) -> CartDTO:
        """Remove the whole line for a product (no partial removal)."""
        product_id = parse_product_id(product_id)

        cart = self._cart_repo.get_by_user(user_id)
        if cart is None:
            raise EntityNotFoundError("Cart not found")

        cart.remove(product_id)
        self._cart_repo.save(cart)

        return build_cart_view(user_id, cart, self._product_repo)
