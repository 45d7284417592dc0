"""JSON-file-backed implementation of OrderRepository (append-only)."""

from __future__ import annotations

import dataclasses
import threading
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from shop.domain.model.order import Order, OrderLine
from shop.domain.model.value_objects import Money, Quantity
from shop.domain.repository.order_repository import OrderRepository
from shop.infrastructure.persistence.json_file import JsonFile


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)
        self._lock = threading.RLock()
        self._file.ensure()

    # --- OrderRepository interface --------------------------------------------

    def add(self, order: Order) -> Order:
        with self._lock:
            orders = self._file.load()
            next_id = max((o["id"] for o in orders), default=0) + 1
            stored = dataclasses.replace(order, id=next_id)
            orders.append(self._to_raw(stored))
            self._file.persist(orders)
        return stored

    def list_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._file.load()]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "user_id": order.user_id,
            "created_at": order.created_at.isoformat(),
            "total_amount": str(order.total_amount.amount),
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "unit_price": str(item.unit_price.amount),
                    "quantity": item.quantity.value,
                    "line_total": str(item.line_total.amount),
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        # Totals are derived from the lines; the stored copies are for readers
        # of the file only.
        items = tuple(
            OrderLine(
                product_id=i["product_id"],
                product_name=i["product_name"],
                unit_price=Money(Decimal(i["unit_price"])),
                quantity=Quantity(i["quantity"]),
            )
            for i in raw["items"]
        )
        return Order(
            id=raw["id"],
            user_id=raw["user_id"],
            items=items,
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
