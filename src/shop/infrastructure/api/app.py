"""FastAPI application factory for the shop HTTP API."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shop.application.access import AccessGuard, Identity
from shop.config import Settings
from shop.infrastructure.api import (
    auth_routes,
    cart_routes,
    catalog_routes,
    order_routes,
)
from shop.infrastructure.api.errors import envelope, install_error_handlers
from shop.infrastructure.api.schemas import IdentitySchema, render
from shop.infrastructure.api.security import current_user
from shop.infrastructure.bootstrap import Services, token_codec

logger = logging.getLogger(__name__)


def create_app(settings: Settings, services: Optional[Services] = None) -> FastAPI:
    """Build the app around an explicitly opened ``Services`` handle.

    Fails fast with ``ConfigurationError`` when the token secret is
    missing.  The handle is closed when the app shuts down.
    """
    guard = AccessGuard(token_codec(settings))
    services = services or Services.open(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        services.close()

    app = FastAPI(title="shop", lifespan=lifespan)
    app.state.services = services
    app.state.guard = guard

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_error_handlers(app)

    app.include_router(auth_routes.router)
    app.include_router(catalog_routes.router)
    app.include_router(cart_routes.router)
    app.include_router(order_routes.router)

    @app.get("/health")
    def health() -> JSONResponse:
        return envelope("Server is running")

    @app.get("/me")
    def me(identity: Identity = Depends(current_user)) -> JSONResponse:
        return envelope(
            "Authorized",
            render(IdentitySchema, {"user_id": identity.user_id, "role": identity.role.value}),
        )

    logger.info("API ready, data in %s", settings.data_dir)
    return app
