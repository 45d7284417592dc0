"""Domain service: Stock Commit.

Coordinates the cross-aggregate part of placing an order: checking the
lines taken from a cart against live product data and deducting
stock for them.

The two-phase approach (validate-then-mutate) ensures stock is never
partially deducted for an order that is ultimately rejected.  The
mutate phase uses the repository's conditional decrement, so a
competing order that drained a product between the two phases is
caught there and every line already taken is given back.
"""

from __future__ import annotations

import logging

from shop.domain.exceptions import (
    EmptyCartError,
    InsufficientStockError,
    ProductGoneError,
)
from shop.domain.model.cart import CartLine
from shop.domain.model.order import OrderLine
from shop.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class StockCommitService:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def snapshot_lines(self, cart_lines: list[CartLine]) -> list[OrderLine]:
        """Phase 1: validate every cart line and capture order lines.

        Nothing is mutated.  Raises on the first line that cannot be
        ordered.
        """
        if not cart_lines:
            raise EmptyCartError()

        lines: list[OrderLine] = []
        for cart_line in cart_lines:
            product = self._product_repo.get_by_id(cart_line.product_id)
            if product is None:
                raise ProductGoneError(cart_line.product_id)

            qty = cart_line.quantity.value
            if qty > product.stock:
                raise InsufficientStockError(product.name, qty, product.stock)

            lines.append(
                OrderLine(
                    product_id=product.id,
                    product_name=product.name,
                    unit_price=product.price,  # <-- price snapshot
                    quantity=cart_line.quantity,
                )
            )
        return lines

    def deduct(self, lines: list[OrderLine]) -> None:
        """Phase 2: take stock for every line, all or nothing."""
        taken: list[OrderLine] = []

        for line in lines:
            qty = line.quantity.value
            if not self._product_repo.decrement_stock(line.product_id, qty):
                logger.warning(
                    "Stock for %s ran out during commit, rolling back %d line(s)",
                    line.product_name,
                    len(taken),
                )
                self.restore(taken)
                current = self._product_repo.get_by_id(line.product_id)
                if current is None:
                    raise ProductGoneError(line.product_id)
                raise InsufficientStockError(line.product_name, qty, current.stock)
            taken.append(line)

    def restore(self, lines: list[OrderLine]) -> None:
        """Give back stock previously taken by ``deduct``."""
        for line in lines:
            self._product_repo.restock(line.product_id, line.quantity.value)
