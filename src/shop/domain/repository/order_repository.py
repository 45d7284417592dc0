"""Abstract repository for Order aggregate.

Orders are append-only: there is no update or delete.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def add(self, order: Order) -> Order:
        """Persist a new order and return it with its assigned ID."""

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every order, oldest first."""
