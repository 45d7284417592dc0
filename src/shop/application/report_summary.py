"""Application service: Report Summary use case (query).

Read-only rollups over every committed order: count, revenue and the
best-selling products by quantity.
"""

from __future__ import annotations

from collections import Counter
from decimal import Decimal

from shop.application.dto import ReportSummaryDTO, TopProductDTO
from shop.domain.repository.order_repository import OrderRepository

TOP_PRODUCTS_LIMIT = 3


class ReportSummaryHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self) -> ReportSummaryDTO:
        orders = self._order_repo.list_all()

        revenue = Decimal("0")
        sold: Counter[str] = Counter()
        names: dict[str, str] = {}

        for order in orders:
            revenue += order.total_amount.amount
            for item in order.items:
                sold[item.product_id] += item.quantity.value
                # first snapshot name wins
                names.setdefault(item.product_id, item.product_name)

        return ReportSummaryDTO(
            total_orders=len(orders),
            total_revenue=revenue,
            top_products=[
                TopProductDTO(product_id=pid, name=names[pid], total_sold=qty)
                for pid, qty in sold.most_common(TOP_PRODUCTS_LIMIT)
            ],
        )
