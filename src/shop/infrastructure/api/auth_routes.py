"""Account endpoints: self-registration and login."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from shop.infrastructure.api.errors import envelope
from shop.infrastructure.api.schemas import (
    LoginRequest,
    LoginSchema,
    RegisterRequest,
    UserSchema,
    render,
)
from shop.infrastructure.api.security import get_services
from shop.infrastructure.bootstrap import Services

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register")
def register(
    body: RegisterRequest,
    services: Services = Depends(get_services),
) -> JSONResponse:
    user = services.register_user().handle(
        name=body.name, email=body.email, password=body.password
    )
    return envelope(
        "User registered successfully",
        {"user": render(UserSchema, user)},
        status_code=201,
    )


@router.post("/login")
def login(
    body: LoginRequest,
    services: Services = Depends(get_services),
) -> JSONResponse:
    result = services.login().handle(email=body.email, password=body.password)
    return envelope("Login successful", render(LoginSchema, result))
