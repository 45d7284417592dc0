"""Product catalog endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from shop.application.access import Identity
from shop.infrastructure.api.errors import envelope
from shop.infrastructure.api.schemas import (
    ProductCreateRequest,
    ProductPageSchema,
    ProductSchema,
    ProductUpdateRequest,
    render,
)
from shop.infrastructure.api.security import current_admin, get_services
from shop.infrastructure.bootstrap import Services

router = APIRouter(prefix="/products", tags=["products"])


@router.get("")
def list_products(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    search: str = Query(""),
    services: Services = Depends(get_services),
) -> JSONResponse:
    result = services.list_products().handle(page=page, limit=limit, search=search)
    return envelope("Products fetched successfully", render(ProductPageSchema, result))


@router.get("/{product_id}")
def get_product(
    product_id: str,
    services: Services = Depends(get_services),
) -> JSONResponse:
    product = services.show_product().handle(product_id)
    return envelope(
        "Product fetched successfully",
        {"product": render(ProductSchema, product)},
    )


@router.post("")
def create_product(
    body: ProductCreateRequest,
    _admin: Identity = Depends(current_admin),
    services: Services = Depends(get_services),
) -> JSONResponse:
    product = services.add_product().handle(
        name=body.name,
        price=body.price,
        stock=body.stock,
        description=body.description,
    )
    return envelope(
        "Product created successfully",
        {"product": render(ProductSchema, product)},
        status_code=201,
    )


@router.put("/{product_id}")
def update_product(
    product_id: str,
    body: ProductUpdateRequest,
    _admin: Identity = Depends(current_admin),
    services: Services = Depends(get_services),
) -> JSONResponse:
    fields = body.model_dump(exclude_unset=True, exclude_none=True)
    product = services.update_product().handle(product_id, **fields)
    return envelope(
        "Product updated successfully",
        {"product": render(ProductSchema, product)},
    )


@router.delete("/{product_id}")
def delete_product(
    product_id: str,
    _admin: Identity = Depends(current_admin),
    services: Services = Depends(get_services),
) -> JSONResponse:
    services.delete_product().handle(product_id)
    return envelope("Product deleted successfully")
