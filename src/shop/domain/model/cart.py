"""Cart aggregate, one per user.

A cart holds unresolved references to catalog products plus the
desired quantity.  Product details are joined in on read by the
application layer; the cart itself only knows product IDs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from shop.domain.exceptions import CapacityExceededError, EntityNotFoundError
from shop.domain.model.product import Product
from shop.domain.model.value_objects import Quantity


@dataclass
class CartLine:
    product_id: str
    quantity: Quantity


@dataclass
class Cart:
    """Aggregate root for a user's shopping cart.

    Invariants:
    - at most one line per product
    - every line quantity is >= 1 (guaranteed by ``Quantity``)
    """

    user_id: str
    lines: list[CartLine] = field(default_factory=list)
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def quantity_of(self, product_id: str) -> int:
        line = self._find_line(product_id)
        return line.quantity.value if line is not None else 0

    def add(self, product: Product, quantity: Quantity) -> CartLine:
        """Add *quantity* units of *product*, merging with an existing line.

        The merged quantity is checked against the product's stock at
        this moment.  The check is advisory: stock is validated again
        when the order is placed.
        """
        line = self._find_line(product.id)
        merged = quantity if line is None else line.quantity + quantity

        if merged.value > product.stock:
            raise CapacityExceededError(
                f"Quantity exceeds available stock ({product.stock})"
            )

        if line is None:
            line = CartLine(product_id=product.id, quantity=merged)
            self.lines.append(line)
        else:
            line.quantity = merged
        self._touch()
        return line

    def remove(self, product_id: str) -> None:
        """Drop the whole line for *product_id*."""
        line = self._find_line(product_id)
        if line is None:
            raise EntityNotFoundError("Product not found in cart")
        self.lines.remove(line)
        self._touch()

    def take_lines(self) -> list[CartLine]:
        """Empty the cart and hand back the lines it held."""
        taken, self.lines = self.lines, []
        self._touch()
        return taken

    def put_back(self, lines: list[CartLine]) -> None:
        """Merge lines from ``take_lines`` back in.

        No stock check: these lines were accepted once already, and
        stock is validated again at the next checkout.
        """
        if not lines:
            return
        for taken in lines:
            line = self._find_line(taken.product_id)
            if line is None:
                self.lines.append(CartLine(taken.product_id, taken.quantity))
            else:
                line.quantity = line.quantity + taken.quantity
        self._touch()

    # --- Internal helpers -----------------------------------------------------

    def _find_line(self, product_id: str) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None

    def _touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
