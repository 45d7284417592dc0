"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI and HTTP layers can catch them uniformly and map them to
user-facing messages and status codes.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Malformed input or a violated field-level rule."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class CapacityExceededError(DomainException):
    """A cart line would hold more units than the product has in stock."""


class DuplicateEntityError(DomainException):
    """An entity with the same unique key already exists."""


class OrderRejectedError(DomainException):
    """Order placement was refused; nothing was changed."""


class EmptyCartError(OrderRejectedError):
    """The cart has no lines to order."""

    def __init__(self) -> None:
        super().__init__("Cart is empty")


class ProductGoneError(OrderRejectedError):
    """A product referenced by the cart was removed from the catalog."""

    def __init__(self, product_id: str) -> None:
        self.product_id = product_id
        super().__init__("A product in the cart no longer exists")


class InsufficientStockError(OrderRejectedError):
    """A line asks for more units than the product currently has."""

    def __init__(self, product_name: str, requested: int, available: int) -> None:
        self.product_name = product_name
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient stock for product: {product_name} "
            f"(need {requested}, have {available})"
        )
