"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the application layer and its callers (HTTP API,
CLI) without exposing domain internals to the outside world.  Money is
carried as Decimal; each caller formats it the way it needs.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from shop.domain.model.order import Order
from shop.domain.model.product import Product
from shop.domain.model.user import User


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    price: Decimal
    stock: int
    description: str
    created_at: datetime
    updated_at: datetime

    @staticmethod
    def from_domain(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            price=product.price.amount,
            stock=product.stock,
            description=product.description,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


@dataclass(frozen=True)
class PaginationDTO:
    page: int
    limit: int
    total_items: int
    total_pages: int


@dataclass(frozen=True)
class ProductPageDTO:
    products: list[ProductDTO]
    pagination: PaginationDTO


@dataclass(frozen=True)
class CartLineDTO:
    """A cart line joined with the live product (None if it was deleted)."""

    product_id: str
    quantity: int
    product: ProductDTO | None
    line_total: Decimal


@dataclass(frozen=True)
class CartDTO:
    user_id: str
    items: list[CartLineDTO]
    subtotal: Decimal


@dataclass(frozen=True)
class OrderLineDTO:
    product_id: str
    name: str
    price: Decimal
    quantity: int
    line_total: Decimal


@dataclass(frozen=True)
class OrderDTO:
    id: int
    user_id: str
    items: list[OrderLineDTO]
    total_amount: Decimal
    created_at: datetime

    @staticmethod
    def from_domain(order: Order) -> OrderDTO:
        """Build the DTO for an order the repository has stored."""
        if order.id is None:
            raise ValueError("Order has no ID; store it with OrderRepository.add first")
        return OrderDTO(
            id=order.id,
            user_id=order.user_id,
            items=[
                OrderLineDTO(
                    product_id=item.product_id,
                    name=item.product_name,
                    price=item.unit_price.amount,
                    quantity=item.quantity.value,
                    line_total=item.line_total.amount,
                )
                for item in order.items
            ],
            total_amount=order.total_amount.amount,
            created_at=order.created_at,
        )


@dataclass(frozen=True)
class TopProductDTO:
    product_id: str
    name: str
    total_sold: int


@dataclass(frozen=True)
class ReportSummaryDTO:
    total_orders: int
    total_revenue: Decimal
    top_products: list[TopProductDTO]


@dataclass(frozen=True)
class UserDTO:
    id: str
    name: str
    email: str
    role: str

    @staticmethod
    def from_domain(user: User) -> UserDTO:
        return UserDTO(id=user.id, name=user.name, email=user.email, role=user.role)


@dataclass(frozen=True)
class LoginDTO:
    token: str
    user: UserDTO
