"""Abstract repository for Cart aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.cart import Cart, CartLine


class CartRepository(ABC):

    @abstractmethod
    def get_by_user(self, user_id: str) -> Cart | None:
        """Return the user's cart, or None if they never added anything."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Persist a new or updated cart (one per user)."""

    @abstractmethod
    def take_lines(self, user_id: str) -> list[CartLine]:
        """Empty the user's cart and return the lines it held.

        Must be atomic with respect to other calls on the same cart: two
        concurrent callers never both receive the same lines.  Returns an
        empty list when there is no cart or it is already empty.
        """

    @abstractmethod
    def return_lines(self, user_id: str, lines: list[CartLine]) -> None:
        """Merge lines previously obtained from ``take_lines`` back in."""
