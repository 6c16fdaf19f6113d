"""Order service: validated, priced order creation."""

from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol

import structlog

from retailhub.application.common.service import Entity, RepositoryProtocol, Service
from retailhub.exceptions import InsufficientStockError, NotFoundError, ValidationError

logger = structlog.get_logger(__name__)

ORDER_STATUS_SUCCESS = "SUCCESS"


@dataclass(frozen=True)
class OrderLine:
    """One validated order line, priced at order time."""

    product_id: int
    quantity: int
    price: float
    unit_quantity: str


class OrderRepositoryProtocol(RepositoryProtocol, Protocol):
    def count_orders(self) -> int: ...

    def create_with_items(self, order: dict[str, Any], lines: Sequence[OrderLine]) -> Entity: ...


class StockRepositoryProtocol(Protocol):
    label: str

    def get_by_id(self, id: str) -> Entity | None: ...

    def current_stock(self, product_id: int) -> float: ...

    def stock_unit(self, product_id: int) -> str: ...


class OrderService(Service):
    """Orders are priced from the product table and limited by available stock."""

    repository: OrderRepositoryProtocol

    def __init__(
        self,
        repository: OrderRepositoryProtocol,
        product_repository: StockRepositoryProtocol,
        invoice_prefix: str = "TR",
    ) -> None:
        super().__init__(repository)
        self.product_repository = product_repository
        self.invoice_prefix = invoice_prefix

    def next_invoice_number(self) -> str:
        """``{prefix}_{sequence:05d}`` where sequence is one past the order count."""
        sequence = self.repository.count_orders() + 1
        return f"{self.invoice_prefix}_{sequence:05d}"

    def create_order(self, payment_method: str, items: Sequence[tuple[int, int]]) -> Entity:
        """
        Create an order from (product_id, quantity) pairs.

        Each product must exist, be active and have enough stock for the
        total quantity ordered across all lines. The order and one stock-out
        per line are written in a single transaction.

        Args:
            payment_method: How the order is paid
            items: Product ids with the quantity ordered

        Returns:
            The created order with its items

        Raises:
            ValidationError: If there are no items or a product is inactive
            NotFoundError: If a product does not exist
            InsufficientStockError: If a product lacks stock
        """
        if not items:
            raise ValidationError("Order must contain at least one item", field="items")

        requested = Counter[int]()
        for product_id, quantity in items:
            requested[product_id] += quantity

        products: dict[int, Entity] = {}
        for product_id, total_quantity in requested.items():
            product = self.product_repository.get_by_id(str(product_id))
            if product is None:
                raise NotFoundError(self.product_repository.label, product_id, field="product_id")
            if product.get("isActive") is False:
                raise ValidationError(f"Product {product_id} is not active", field="product_id")

            available = self.product_repository.current_stock(product_id)
            if total_quantity > available:
                raise InsufficientStockError(product_id, available, total_quantity)
            products[product_id] = product

        lines = [
            OrderLine(
                product_id=product_id,
                quantity=quantity,
                price=products[product_id]["price"],
                unit_quantity=self.product_repository.stock_unit(product_id),
            )
            for product_id, quantity in items
        ]
        total_amount = sum(line.price * line.quantity for line in lines)

        order = self.repository.create_with_items(
            {
                "invoice_number": self.next_invoice_number(),
                "payment_method": payment_method,
                "total_amount": total_amount,
                "status": ORDER_STATUS_SUCCESS,
                "is_active": True,
            },
            lines,
        )
        logger.info(
            "order_placed",
            order_id=order["id"],
            invoice_number=order["invoiceNumber"],
            total_amount=total_amount,
        )
        return order
