"""Application service: Add To Cart use case.

Creates the user's cart lazily on the first add.  Adding a product that
is already in the cart merges the quantities.
"""

from __future__ import annotations

from shop.application.cart_view import build_cart_view
from shop.application.dto import CartDTO
from shop.domain.exceptions import EntityNotFoundError
from shop.domain.model.cart import Cart
from shop.domain.model.value_objects import Quantity, parse_product_id
from shop.domain.repository.cart_repository import CartRepository
from shop.domain.repository.product_repository import ProductRepository


class AddToCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, user_id: str, product_id: str, quantity: int) -> CartDTO:
        """Add *quantity* units of a product to the user's cart.

        Steps:
        1. Validate the product ID shape and the quantity.
        2. Resolve the product (fail if not found).
        3. Merge into the cart; the cart checks the merged quantity
           against current stock.
        4. Persist and return the resolved cart.
        """
        product_id = parse_product_id(product_id)
        qty = Quantity(quantity)

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product not found")

        cart = self._cart_repo.get_by_user(user_id) or Cart(user_id=user_id)
        cart.add(product, qty)
        self._cart_repo.save(cart)

        return build_cart_view(user_id, cart, self._product_repo)
