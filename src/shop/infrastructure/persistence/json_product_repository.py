"""JSON-file-backed implementation of ProductRepository.

Every read-modify-write runs under one re-entrant lock, which makes
``decrement_stock`` a single conditional operation as seen by every
request served by this process.
"""

from __future__ import annotations

import threading
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from shop.domain.model.product import Product
from shop.domain.model.value_objects import Money
from shop.domain.repository.product_repository import ProductRepository
from shop.infrastructure.persistence.json_file import JsonFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)
        self._lock = threading.RLock()
        self._file.ensure()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        with self._lock:
            return self._load().get(product_id)

    def list_all(self) -> list[Product]:
        with self._lock:
            return list(self._load().values())

    def save(self, product: Product) -> None:
        with self._lock:
            products = self._load()
            products[product.id] = product
            self._persist(products)

    def delete(self, product_id: str) -> bool:
        with self._lock:
            products = self._load()
            if products.pop(product_id, None) is None:
                return False
            self._persist(products)
            return True

    def decrement_stock(self, product_id: str, quantity: int) -> bool:
        with self._lock:
            products = self._load()
            product = products.get(product_id)
            if product is None or not product.take_stock(quantity):
                return False
            self._persist(products)
            return True

    def restock(self, product_id: str, quantity: int) -> None:
        with self._lock:
            products = self._load()
            product = products.get(product_id)
            if product is None:
                return
            product.return_stock(quantity)
            self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        return {
            item["id"]: Product(
                id=item["id"],
                name=item["name"],
                price=Money(Decimal(item["price"])),
                stock=item["stock"],
                description=item["description"],
                created_at=datetime.fromisoformat(item["created_at"]),
                updated_at=datetime.fromisoformat(item["updated_at"]),
            )
            for item in self._file.load()
        }

    def _persist(self, products: dict[str, Product]) -> None:
        self._file.persist(
            [
                {
                    "id": p.id,
                    "name": p.name,
                    "price": str(p.price.amount),
                    "stock": p.stock,
                    "description": p.description,
                    "created_at": p.created_at.isoformat(),
                    "updated_at": p.updated_at.isoformat(),
                }
                for p in products.values()
            ]
        )
