"""Order placement and sales report endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from shop.application.access import Identity
from shop.infrastructure.api.errors import envelope
from shop.infrastructure.api.schemas import OrderSchema, ReportSummarySchema, render
from shop.infrastructure.api.security import current_admin, current_user, get_services
from shop.infrastructure.bootstrap import Services

router = APIRouter(tags=["orders"])


@router.post("/orders")
def place_order(
    identity: Identity = Depends(current_user),
    services: Services = Depends(get_services),
) -> JSONResponse:
    order = services.place_order().handle(identity.user_id)
    return envelope(
        "Order placed successfully",
        {"order": render(OrderSchema, order)},
        status_code=201,
    )


@router.get("/reports/summary")
def report_summary(
    _admin: Identity = Depends(current_admin),
    services: Services = Depends(get_services),
) -> JSONResponse:
    summary = services.report_summary().handle()
    return envelope("Report fetched successfully", render(ReportSummarySchema, summary))
