"""Application service: Register User use case."""

from __future__ import annotations

import logging

from shop.application.access import PasswordHasher
from shop.application.dto import UserDTO
from shop.domain.exceptions import DuplicateEntityError, ValidationError
from shop.domain.model.user import ROLE_USER, User, normalize_email
from shop.domain.repository.user_repository import UserRepository

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


class RegisterUserHandler:

    def __init__(self, user_repo: UserRepository, hasher: PasswordHasher) -> None:
        self._user_repo = user_repo
        self._hasher = hasher

    def handle(
        self,
        name: str,
        email: str,
        password: str,
        role: str = ROLE_USER,
    ) -> UserDTO:
        """Create an account.  Self-registration through the API is always ``user``."""
        if not isinstance(password, str) or len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )
        if self._user_repo.get_by_email(normalize_email(email)) is not None:
            raise DuplicateEntityError("Email is already registered")

        user = User.create(
            name=name,
            email=email,
            password_hash=self._hasher.hash(password),
            role=role,
        )
        self._user_repo.add(user)
        logger.info("User %s registered with role %s", user.id, user.role)
        return UserDTO.from_domain(user)
