"""Explicit persistence handle.

Constructed once at startup from settings and passed to whoever needs
repositories.  ``open()`` creates the data directory and files;
``close()`` releases the handle.  Nothing here is a module-level global.
"""

from __future__ import annotations

import logging
from pathlib import Path

from shop.infrastructure.persistence.json_cart_repository import JsonCartRepository
from shop.infrastructure.persistence.json_order_repository import JsonOrderRepository
from shop.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from shop.infrastructure.persistence.json_user_repository import JsonUserRepository

logger = logging.getLogger(__name__)


class StorageClosedError(RuntimeError):
    """A repository was requested from a storage handle that is not open."""


class Storage:

    def __init__(self, data_dir: Path) -> None:
        self.data_dir = data_dir
        self._products: JsonProductRepository | None = None
        self._carts: JsonCartRepository | None = None
        self._orders: JsonOrderRepository | None = None
        self._users: JsonUserRepository | None = None

    def open(self) -> Storage:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self._products = JsonProductRepository(self.data_dir / "products.json")
        self._carts = JsonCartRepository(self.data_dir / "carts.json")
        self._orders = JsonOrderRepository(self.data_dir / "orders.json")
        self._users = JsonUserRepository(self.data_dir / "users.json")
        logger.info("Storage opened at %s", self.data_dir)
        return self

    def close(self) -> None:
        # Every write is flushed as it happens; only the handles are dropped.
        if self._products is not None:
            logger.info("Storage at %s closed", self.data_dir)
        self._products = self._carts = self._orders = self._users = None

    def __enter__(self) -> Storage:
        return self.open()

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def products(self) -> JsonProductRepository:
        if self._products is None:
            raise StorageClosedError("Storage is not open")
        return self._products

    @property
    def carts(self) -> JsonCartRepository:
        if self._carts is None:
            raise StorageClosedError("Storage is not open")
        return self._carts

    @property
    def orders(self) -> JsonOrderRepository:
        if self._orders is None:
            raise StorageClosedError("Storage is not open")
        return self._orders

    @property
    def users(self) -> JsonUserRepository:
        if self._users is None:
            raise StorageClosedError("Storage is not open")
        return self._users
