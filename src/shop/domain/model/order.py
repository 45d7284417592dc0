"""Order aggregate: an immutable record of a committed purchase.

Each line captures the product's name and unit price by value at commit
time, so later catalog edits never alter historical orders.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from shop.domain.exceptions import ValidationError
from shop.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class OrderLine:
    """Snapshot of one purchased product."""

    product_id: str
    product_name: str
    unit_price: Money  # locked at commit time
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass(frozen=True)
class Order:
    """Aggregate root for placed orders.

    Use the ``Order.create()`` factory for new orders.  The ``__init__``
    is left simple so the repository can reconstitute persisted orders
    (and assign the ID) without re-validating.
    """

    id: int | None
    user_id: str
    items: tuple[OrderLine, ...]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(user_id: str, items: list[OrderLine]) -> Order:
        """Create a new order, enforcing all invariants."""
        if not user_id:
            raise ValidationError("Order must belong to a user")
        if not items:
            raise ValidationError("Order must contain at least one item")

        seen: set[str] = set()
        for item in items:
            if item.product_id in seen:
                raise ValidationError(
                    f"Product '{item.product_name}' appears twice in the order"
                )
            seen.add(item.product_id)

        return Order(id=None, user_id=user_id, items=tuple(items))

    @property
    def total_amount(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result
