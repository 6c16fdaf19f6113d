"""Repository for orders."""

from collections.abc import Mapping, Sequence
from typing import Any

import structlog
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from retailhub.application.sales.order_service import OrderLine
from retailhub.domain.catalog.stock_ledger_service import MovementType, StockSource
from retailhub.infrastructure.common.repository import Repository
from retailhub.mapping.entity_mapper import Entity
from retailhub.models import Order as OrderORM
from retailhub.models import OrderItem as OrderItemORM
from retailhub.models import ProductStock as ProductStockORM

logger = structlog.get_logger(__name__)


class OrderRepository(Repository):
    """Orders with their items and the stock-out movements they cause."""

    def __init__(self, db: Session) -> None:
        super().__init__(db, "order", OrderORM)

    def count_orders(self) -> int:
        return self.db.execute(select(func.count(OrderORM.id))).scalar_one()

    def create_with_items(self, order: Mapping[str, Any], lines: Sequence[OrderLine]) -> Entity:
        """
        Insert the order, its items and one ORDER stock-out per item atomically.

        Args:
            order: Order column values
            lines: Validated order lines

        Returns:
            The created order entity with its items
        """
        instance = OrderORM(**self._writable(order))
        instance.items = [
            OrderItemORM(product_id=line.product_id, quantity=line.quantity, price=line.price)
            for line in lines
        ]

        with self.atomic():
            self.db.add(instance)
            for line in lines:
                self.db.add(
                    ProductStockORM(
                        product_id=line.product_id,
                        quantity=line.quantity,
                        unit_quantity=line.unit_quantity,
                        movement_type=MovementType.OUT.value,
                        source=StockSource.ORDER.value,
                    )
                )
            self.db.flush()
            order_id = instance.id

        logger.info(
            "order_created",
            order_id=order_id,
            invoice_number=order.get("invoice_number"),
            item_count=len(lines),
        )
        return self._require(order_id)
