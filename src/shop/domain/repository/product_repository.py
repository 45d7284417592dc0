"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in the
infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shop.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    @abstractmethod
    def delete(self, product_id: str) -> bool:
        """Remove a product. Returns False if it did not exist."""

    @abstractmethod
    def decrement_stock(self, product_id: str, quantity: int) -> bool:
        """Atomically take *quantity* units if at least that many are in stock.

        Returns False, changing nothing, when the product is missing or
        holds fewer than *quantity* units.
        """

    @abstractmethod
    def restock(self, product_id: str, quantity: int) -> None:
        """Atomically give back *quantity* units (undo of a decrement).

        A product deleted in the meantime is ignored.
        """
