"""Application service: Place Order use case.

Turns the user's cart into an immutable order.  Coordinates three
aggregates (Cart, Product, Order) in a fixed sequence:

1. take every line out of the cart in one step;
2. validate the lines against live stock (no mutation);
3. deduct stock for every line, all or nothing;
4. append the order, the durability boundary.

Taking the lines empties the cart, so a second checkout of the same
cart running alongside finds nothing to order.  A rejection in steps
2-3 puts the lines back and leaves stock untouched.  If step 4 fails,
the stock taken in step 3 and the cart lines are both given back
before the error propagates.
"""

from __future__ import annotations

import logging

from shop.application.dto import OrderDTO
from shop.domain.exceptions import DomainException
from shop.domain.model.cart import CartLine
from shop.domain.model.order import Order
from shop.domain.repository.cart_repository import CartRepository
from shop.domain.repository.order_repository import OrderRepository
from shop.domain.repository.product_repository import ProductRepository
from shop.domain.service.stock_commit_service import StockCommitService

logger = logging.getLogger(__name__)


class PlaceOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._order_repo = order_repo
        self._cart_repo = cart_repo
        self._stock = StockCommitService(product_repo)

    def handle(self, user_id: str) -> OrderDTO:
        cart_lines = self._cart_repo.take_lines(user_id)

        try:
            lines = self._stock.snapshot_lines(cart_lines)
            order = Order.create(user_id=user_id, items=lines)
            self._stock.deduct(lines)
        except DomainException as exc:
            logger.warning("Order for user %s rejected: %s", user_id, exc)
            self._give_back(user_id, cart_lines)
            raise

        try:
            order = self._order_repo.add(order)
        except Exception:
            logger.exception(
                "Persisting order for user %s failed, restoring stock", user_id
            )
            self._stock.restore(lines)
            self._give_back(user_id, cart_lines)
            raise

        logger.info(
            "Order #%s placed by user %s: %d line(s), total %s",
            order.id,
            user_id,
            len(order.items),
            order.total_amount,
        )
        return OrderDTO.from_domain(order)

    def _give_back(self, user_id: str, cart_lines: list[CartLine]) -> None:
        # The caller re-raises the original error either way.
        try:
            self._cart_repo.return_lines(user_id, cart_lines)
        except Exception:
            logger.exception(
                "Could not return %d line(s) to the cart of user %s",
                len(cart_lines),
                user_id,
            )
