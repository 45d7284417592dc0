"""Pydantic schemas for the HTTP boundary.

Request bodies are validated here for shape only (types, presence);
business rules stay in the domain.  Response schemas render the
application DTOs with camelCase keys.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt
from pydantic.alias_generators import to_camel


class _Out(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# --- Requests -----------------------------------------------------------------


class ProductCreateRequest(BaseModel):
    name: str
    price: Decimal
    stock: StrictInt
    description: str


class ProductUpdateRequest(BaseModel):
    """Partial update: omitted (or null) fields keep their value."""

    name: Optional[str] = None
    price: Optional[Decimal] = None
    stock: Optional[StrictInt] = None
    description: Optional[str] = None


class CartAddRequest(BaseModel):
    product_id: str = Field(..., alias="productId")
    quantity: StrictInt


class RegisterRequest(BaseModel):
    name: str
    email: str
    password: str


class LoginRequest(BaseModel):
    email: str
    password: str


# --- Responses ----------------------------------------------------------------


class ProductSchema(_Out):
    id: str
    name: str
    price: float
    stock: int
    description: str
    created_at: datetime
    updated_at: datetime


class PaginationSchema(_Out):
    page: int
    limit: int
    total_items: int
    total_pages: int


class ProductPageSchema(_Out):
    products: list[ProductSchema]
    pagination: PaginationSchema


class CartLineSchema(_Out):
    product_id: str
    quantity: int
    product: Optional[ProductSchema] = None
    line_total: float


class CartSchema(_Out):
    items: list[CartLineSchema]
    subtotal: float


class OrderLineSchema(_Out):
    product_id: str
    name: str
    price: float
    quantity: int
    line_total: float


class OrderSchema(_Out):
    id: int
    user_id: str
    items: list[OrderLineSchema]
    total_amount: float
    created_at: datetime


class TopProductSchema(_Out):
    product_id: str
    name: str
    total_sold: int


class ReportSummarySchema(_Out):
    total_orders: int
    total_revenue: float
    top_products: list[TopProductSchema]


class IdentitySchema(_Out):
    user_id: str
    role: str


class UserSchema(_Out):
    id: str
    name: str
    email: str
    role: str


class LoginSchema(_Out):
    token: str
    user: UserSchema


def render(schema: type[_Out], obj: Any) -> dict:
    """Validate a DTO against *schema* and dump it as camelCase JSON data."""
    return schema.model_validate(obj).model_dump(by_alias=True, mode="json")
