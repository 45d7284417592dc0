"""Access checks applied before any use case runs.

Two ordered checks: ``authenticate`` turns a bearer credential into an
``Identity``; ``authorize`` compares that identity's role with what the
operation needs.  Neither knows about HTTP; the API layer only wires
them in.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class Role(Enum):
    USER = "user"
    ADMIN = "admin"


@dataclass(frozen=True)
class Identity:
    user_id: str
    role: Role


class AccessError(Exception):
    """Base class for authentication and authorization failures."""


class UnauthorizedError(AccessError):
    """Missing or invalid credential."""


class ForbiddenError(AccessError):
    """Valid credential, insufficient role."""


class TokenDecoder(Protocol):
    def decode(self, token: str) -> Identity: ...


class TokenIssuer(Protocol):
    def issue(self, identity: Identity) -> str: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...

    def verify(self, password: str, stored: str) -> bool: ...


_BEARER_PREFIX = "bearer "


class AccessGuard:

    def __init__(self, decoder: TokenDecoder) -> None:
        self._decoder = decoder

    def authenticate(self, authorization: str | None) -> Identity:
        """Resolve an ``Authorization`` header value to an identity."""
        if not authorization or not authorization.lower().startswith(_BEARER_PREFIX):
            raise UnauthorizedError("Unauthorized")
        token = authorization[len(_BEARER_PREFIX):].strip()
        if not token:
            raise UnauthorizedError("Unauthorized")
        return self._decoder.decode(token)

    @staticmethod
    def authorize(identity: Identity, required: Role) -> Identity:
        # USER-level operations are open to admins as well
        if required is Role.ADMIN and identity.role is not Role.ADMIN:
            raise ForbiddenError("Forbidden: admin access required")
        return identity
