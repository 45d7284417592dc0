"""Application service: Login use case.

Exchanges an email and password for a bearer token.  Unknown emails and
wrong passwords fail the same way.
"""

from __future__ import annotations

import logging

from shop.application.access import (
    Identity,
    PasswordHasher,
    Role,
    TokenIssuer,
    UnauthorizedError,
)
from shop.application.dto import LoginDTO, UserDTO
from shop.domain.exceptions import ValidationError
from shop.domain.model.user import normalize_email
from shop.domain.repository.user_repository import UserRepository

logger = logging.getLogger(__name__)


class LoginHandler:

    def __init__(
        self,
        user_repo: UserRepository,
        hasher: PasswordHasher,
        issuer: TokenIssuer,
    ) -> None:
        self._user_repo = user_repo
        self._hasher = hasher
        self._issuer = issuer

    def handle(self, email: str, password: str) -> LoginDTO:
        try:
            user = self._user_repo.get_by_email(normalize_email(email))
        except ValidationError:
            user = None

        if user is None or not self._hasher.verify(password, user.password_hash):
            logger.warning("Failed login attempt")
            raise UnauthorizedError("Invalid email or password")

        token = self._issuer.issue(Identity(user_id=user.id, role=Role(user.role)))
        logger.info("User %s logged in", user.id)
        return LoginDTO(token=token, user=UserDTO.from_domain(user))
