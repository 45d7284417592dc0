"""FastAPI dependencies for the access checks.

Thin adapters: the header is read here, the checks themselves live in
``shop.application.access``.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, Header, Request

from shop.application.access import AccessGuard, Identity, Role
from shop.infrastructure.bootstrap import Services


def get_services(request: Request) -> Services:
    return request.app.state.services


def get_guard(request: Request) -> AccessGuard:
    return request.app.state.guard


def current_user(
    authorization: Optional[str] = Header(default=None),
    guard: AccessGuard = Depends(get_guard),
) -> Identity:
    identity = guard.authenticate(authorization)
    return guard.authorize(identity, Role.USER)


def current_admin(
    identity: Identity = Depends(current_user),
    guard: AccessGuard = Depends(get_guard),
) -> Identity:
    return guard.authorize(identity, Role.ADMIN)
