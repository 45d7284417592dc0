"""JSON-file-backed implementation of CartRepository.

Every method runs under one re-entrant lock, so ``take_lines`` empties a
cart in a single step as seen by every request served by this process.
"""

from __future__ import annotations

import threading
from datetime import datetime
from pathlib import Path

from shop.domain.model.cart import Cart, CartLine
from shop.domain.model.value_objects import Quantity
from shop.domain.repository.cart_repository import CartRepository
from shop.infrastructure.persistence.json_file import JsonFile


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)
        self._lock = threading.RLock()
        self._file.ensure()

    # --- CartRepository interface ---------------------------------------------

    def get_by_user(self, user_id: str) -> Cart | None:
        with self._lock:
            for raw in self._file.load():
                if raw["user_id"] == user_id:
                    return self._to_domain(raw)
        return None

    def save(self, cart: Cart) -> None:
        with self._lock:
            records = self._file.load()
            # Upsert: one record per user
            for i, raw in enumerate(records):
                if raw["user_id"] == cart.user_id:
                    records[i] = self._to_raw(cart)
                    break
            else:
                records.append(self._to_raw(cart))
            self._file.persist(records)

    def take_lines(self, user_id: str) -> list[CartLine]:
        with self._lock:
            cart = self.get_by_user(user_id)
            if cart is None or cart.is_empty:
                return []
            lines = cart.take_lines()
            self.save(cart)
            return lines

    def return_lines(self, user_id: str, lines: list[CartLine]) -> None:
        if not lines:
            return
        with self._lock:
            cart = self.get_by_user(user_id) or Cart(user_id=user_id)
            cart.put_back(lines)
            self.save(cart)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: Cart) -> dict:
        return {
            "user_id": cart.user_id,
            "updated_at": cart.updated_at.isoformat(),
            "items": [
                {"product_id": line.product_id, "quantity": line.quantity.value}
                for line in cart.lines
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Cart:
        return Cart(
            user_id=raw["user_id"],
            lines=[
                CartLine(product_id=i["product_id"], quantity=Quantity(i["quantity"]))
                for i in raw["items"]
            ],
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
