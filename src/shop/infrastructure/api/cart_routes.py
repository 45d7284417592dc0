"""Shopping cart endpoints; the cart is always the caller's own."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from shop.application.access import Identity
from shop.application.dto import CartDTO
from shop.infrastructure.api.errors import envelope
from shop.infrastructure.api.schemas import CartAddRequest, CartSchema, render
from shop.infrastructure.api.security import current_user, get_services
from shop.infrastructure.bootstrap import Services

router = APIRouter(prefix="/cart", tags=["cart"])


def _cart_data(cart: CartDTO) -> dict:
    rendered = render(CartSchema, cart)
    return {"cart": rendered, "subtotal": rendered["subtotal"]}


@router.post("")
def add_to_cart(
    body: CartAddRequest,
    identity: Identity = Depends(current_user),
    services: Services = Depends(get_services),
) -> JSONResponse:
    cart = services.add_to_cart().handle(
        user_id=identity.user_id,
        product_id=body.product_id,
        quantity=body.quantity,
    )
    return envelope("Item added to cart", _cart_data(cart))


@router.get("")
def get_cart(
    identity: Identity = Depends(current_user),
    services: Services = Depends(get_services),
) -> JSONResponse:
    cart = services.show_cart().handle(identity.user_id)
    return envelope("Cart fetched successfully", _cart_data(cart))


@router.delete("/{product_id}")
def remove_from_cart(
    product_id: str,
    identity: Identity = Depends(current_user),
    services: Services = Depends(get_services),
) -> JSONResponse:
    cart = services.remove_from_cart().handle(identity.user_id, product_id)
    return envelope("Item removed from cart", _cart_data(cart))
