"""HS256 bearer tokens carrying ``userId`` and ``role`` claims."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import jwt

from shop.application.access import Identity, Role, UnauthorizedError

ALGORITHM = "HS256"


class JwtTokenCodec:

    def __init__(self, secret: str, ttl: timedelta) -> None:
        self._secret = secret
        self._ttl = ttl

    def issue(self, identity: Identity) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "userId": identity.user_id,
            "role": identity.role.value,
            "iat": now,
            "exp": now + self._ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def decode(self, token: str) -> Identity:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={"require": ["exp", "userId", "role"]},
            )
            return Identity(user_id=str(payload["userId"]), role=Role(payload["role"]))
        except (jwt.PyJWTError, ValueError) as exc:
            raise UnauthorizedError("Invalid or expired token") from exc
