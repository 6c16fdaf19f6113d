"""Tests for OrderService with in-memory repositories."""

from collections.abc import Sequence
from typing import Any

import pytest

from retailhub.application.sales.order_service import OrderLine, OrderService
from retailhub.exceptions import InsufficientStockError, NotFoundError, ValidationError


class FakeProductRepository:
    label = "Product"

    def __init__(self, products: dict[int, dict[str, Any]], stock: dict[int, float]) -> None:
        self.products = products
        self.stock = stock

    def get_by_id(self, id: str) -> dict[str, Any] | None:
        return self.products.get(int(id))

    def current_stock(self, product_id: int) -> float:
        return self.stock.get(product_id, 0)

    def stock_unit(self, product_id: int) -> str:
        return "pcs"


class FakeOrderRepository:
    label = "Order"

    def __init__(self, existing_orders: int = 0) -> None:
        self.existing_orders = existing_orders
        self.created: list[tuple[dict[str, Any], Sequence[OrderLine]]] = []

    def count_orders(self) -> int:
        return self.existing_orders

    def create_with_items(
        self, order: dict[str, Any], lines: Sequence[OrderLine]
    ) -> dict[str, Any]:
        self.created.append((order, lines))
        return {"id": "1", "invoiceNumber": order["invoice_number"], **order}


@pytest.fixture
def products() -> FakeProductRepository:
    return FakeProductRepository(
        products={
            1: {"id": "1", "price": 5000, "isActive": True},
            2: {"id": "2", "price": 1500, "isActive": False},
        },
        stock={1: 10, 2: 10},
    )


class TestCreateOrder:
    def test_prices_lines_from_products(self, products: FakeProductRepository) -> None:
        orders = FakeOrderRepository()
        service = OrderService(orders, products)

        service.create_order("CASH", [(1, 3)])

        order, lines = orders.created[0]
        assert order["total_amount"] == 15000
        assert order["status"] == "SUCCESS"
        assert lines == [OrderLine(product_id=1, quantity=3, price=5000, unit_quantity="pcs")]

    def test_invoice_number_follows_order_count(self, products: FakeProductRepository) -> None:
        service = OrderService(FakeOrderRepository(existing_orders=41), products, "INV")

        assert service.next_invoice_number() == "INV_00042"

    def test_quantities_of_repeated_products_are_added_up(
        self, products: FakeProductRepository
    ) -> None:
        orders = FakeOrderRepository()
        service = OrderService(orders, products)

        with pytest.raises(InsufficientStockError) as exc_info:
            service.create_order("CASH", [(1, 6), (1, 6)])

        assert exc_info.value.available == 10
        assert exc_info.value.requested == 12
        assert "Available: 10, Requested: 12" in exc_info.value.message
        assert orders.created == []

    def test_unknown_product(self, products: FakeProductRepository) -> None:
        with pytest.raises(NotFoundError):
            OrderService(FakeOrderRepository(), products).create_order("CASH", [(99, 1)])

    def test_inactive_product(self, products: FakeProductRepository) -> None:
        with pytest.raises(ValidationError, match="not active"):
            OrderService(FakeOrderRepository(), products).create_order("CASH", [(2, 1)])

    def test_empty_order(self, products: FakeProductRepository) -> None:
        with pytest.raises(ValidationError):
            OrderService(FakeOrderRepository(), products).create_order("CASH", [])
