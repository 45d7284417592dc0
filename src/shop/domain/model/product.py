"""Product aggregate.

Products live independently of carts and orders. They have their own
lifecycle: prices change, stock is replenished, products are added and
removed from the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from shop.domain.exceptions import ValidationError
from shop.domain.model.value_objects import Money, new_product_id


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _require_text(value: object, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"Product {field_name} is required")
    return value.strip()


def _require_stock(value: object) -> int:
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise ValidationError("Product stock must be a non-negative integer")
    return value


@dataclass
class Product:
    """A product in the catalog.

    Kept as a mutable dataclass because catalog edits and stock
    deductions are legitimate mutations on the aggregate.  Orders never
    hold a reference to this object; they copy name and price at commit
    time.
    """

    id: str
    name: str
    price: Money
    stock: int
    description: str
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(name: str, price: Money, stock: int, description: str) -> Product:
        """Create a new catalog entry, enforcing all field rules."""
        return Product(
            id=new_product_id(),
            name=_require_text(name, "name"),
            price=price,
            stock=_require_stock(stock),
            description=_require_text(description, "description"),
        )

    # --- Mutations ------------------------------------------------------------

    def update(
        self,
        *,
        name: str | None = None,
        price: Money | None = None,
        stock: int | None = None,
        description: str | None = None,
    ) -> None:
        """Change the supplied fields only.

        All values are validated before any of them is applied, so a bad
        field leaves the product untouched.  Existing orders are not
        affected because they captured a snapshot at creation time.
        """
        new_name = self.name if name is None else _require_text(name, "name")
        new_description = (
            self.description
            if description is None
            else _require_text(description, "description")
        )
        new_stock = self.stock if stock is None else _require_stock(stock)

        self.name = new_name
        self.description = new_description
        self.stock = new_stock
        if price is not None:
            self.price = price
        self.updated_at = _utcnow()

    def take_stock(self, quantity: int) -> bool:
        """Decrement stock by *quantity* only if enough is on hand."""
        if quantity <= 0:
            raise ValidationError("Stock decrement must be positive")
        if quantity > self.stock:
            return False
        self.stock -= quantity
        return True

    def return_stock(self, quantity: int) -> None:
        if quantity <= 0:
            raise ValidationError("Stock increment must be positive")
        self.stock += quantity
