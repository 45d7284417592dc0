"""Read-side join of a cart with live catalog data.

The stored cart only knows product IDs.  Callers that display a cart
need names, prices and a subtotal, so this module resolves each line
against the product repository at read time.  Lines whose product was
deleted are kept with ``product=None`` and contribute nothing to the
subtotal.
"""

from __future__ import annotations

from decimal import Decimal

from shop.application.dto import CartDTO, CartLineDTO, ProductDTO
from shop.domain.model.cart import Cart
from shop.domain.repository.product_repository import ProductRepository


def build_cart_view(
    user_id: str,
    cart: Cart | None,
    product_repo: ProductRepository,
) -> CartDTO:
    if cart is None:
        return CartDTO(user_id=user_id, items=[], subtotal=Decimal("0"))

    items: list[CartLineDTO] = []
    subtotal = Decimal("0")
    for line in cart.lines:
        product = product_repo.get_by_id(line.product_id)
        if product is None:
            items.append(
                CartLineDTO(
                    product_id=line.product_id,
                    quantity=line.quantity.value,
                    product=None,
                    line_total=Decimal("0"),
                )
            )
            continue

        line_total = (product.price * line.quantity.value).amount
        subtotal += line_total
        items.append(
            CartLineDTO(
                product_id=line.product_id,
                quantity=line.quantity.value,
                product=ProductDTO.from_domain(product),
                line_total=line_total,
            )
        )
    return CartDTO(user_id=cart.user_id, items=items, subtotal=subtotal)
