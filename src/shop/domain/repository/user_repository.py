"""Abstract repository for User accounts."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def get_by_email(self, email: str) -> User | None:
        """Return the account registered under a normalized email."""

    @abstractmethod
    def add(self, user: User) -> None:
        """Persist a new account.

        Raises ``DuplicateEntityError`` if the email is already taken.
        The check and the insert form one step.
        """
