"""Integration tests for orders."""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from retailhub import models
from tests.conftest import create_test_product, create_test_stock


class TestCreateOrder:
    """POST /orders prices items, checks stock and books stock-outs."""

    def test_create_order(self, client: TestClient, db_session: Session) -> None:
        chips = create_test_product(db_session, name="Chips", price=5000)
        tea = create_test_product(db_session, name="Tea", price=3000)
        chips_id, tea_id = chips.id, tea.id
        create_test_stock(db_session, chips_id, 10, unit_quantity="pack")
        create_test_stock(db_session, tea_id, 5)

        response = client.post(
            "/api/v1/orders",
            json={
                "payment_method": "CASH",
                "items": [
                    {"product_id": chips_id, "quantity": 3},
                    {"product_id": tea_id, "quantity": 2},
                ],
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body["message"] == "Data created successfully"
        order = body["data"]
        assert order["invoice_number"] == "TR_00001"
        assert order["payment_method"] == "CASH"
        assert order["status"] == "SUCCESS"
        assert order["total_amount"] == 21000
        assert [
            (item["product_id"], item["product_name"], item["quantity"], item["total_price"])
            for item in order["items"]
        ] == [(chips_id, "Chips", 3, 15000), (tea_id, "Tea", 2, 6000)]

        stock_outs = (
            db_session.query(models.ProductStock)
            .filter_by(movement_type="OUT", source="ORDER")
            .order_by(models.ProductStock.id)
            .all()
        )
        assert [(s.product_id, s.quantity, s.unit_quantity) for s in stock_outs] == [
            (chips_id, 3, "pack"),
            (tea_id, 2, "pcs"),
        ]

    def test_invoice_numbers_increase(self, client: TestClient, db_session: Session) -> None:
        product = create_test_product(db_session)
        product_id = product.id
        create_test_stock(db_session, product_id, 10)
        payload = {"payment_method": "QRIS", "items": [{"product_id": product_id, "quantity": 1}]}

        first = client.post("/api/v1/orders", json=payload).json()["data"]
        second = client.post("/api/v1/orders", json=payload).json()["data"]

        assert first["invoice_number"] == "TR_00001"
        assert second["invoice_number"] == "TR_00002"

    def test_insufficient_stock_leaves_no_order(
        self, client: TestClient, db_session: Session
    ) -> None:
        product = create_test_product(db_session)
        product_id = product.id
        create_test_stock(db_session, product_id, 2)

        response = client.post(
            "/api/v1/orders",
            json={"payment_method": "CASH", "items": [{"product_id": product_id, "quantity": 5}]},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = response.json()
        assert body["status"] == "failed"
        assert body["errors"][0]["field"] == "items"
        assert body["errors"][0]["message"] == (
            f"Insufficient stock for product {product_id}. Available: 2, Requested: 5"
        )
        assert db_session.query(models.Order).count() == 0
        assert db_session.query(models.ProductStock).filter_by(movement_type="OUT").count() == 0

    def test_inactive_product(self, client: TestClient, db_session: Session) -> None:
        product = create_test_product(db_session, is_active=False)
        product_id = product.id
        create_test_stock(db_session, product_id, 10)

        response = client.post(
            "/api/v1/orders",
            json={"payment_method": "CASH", "items": [{"product_id": product_id, "quantity": 1}]},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_items_are_required(self, client: TestClient) -> None:
        response = client.post("/api/v1/orders", json={"payment_method": "CASH", "items": []})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["errors"][0]["field"] == "items"


class TestReadOrders:
    def test_list_omits_items_and_detail_includes_them(
        self, client: TestClient, db_session: Session
    ) -> None:
        product = create_test_product(db_session, name="Chips", price=5000)
        product_id = product.id
        create_test_stock(db_session, product_id, 10)
        created = client.post(
            "/api/v1/orders",
            json={"payment_method": "CASH", "items": [{"product_id": product_id, "quantity": 2}]},
        ).json()["data"]

        listing = client.get("/api/v1/orders").json()
        assert listing["metadata"]["total_records"] == 1
        assert listing["data"][0]["items"] == []

        detail = client.get(f"/api/v1/orders/{created['id']}").json()["data"]
        assert detail["items"][0]["product_name"] == "Chips"
        assert detail["items"][0]["total_price"] == 10000

    def test_orders_cannot_be_deleted(self, client: TestClient) -> None:
        response = client.delete("/api/v1/orders/1")

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
        assert response.json()["status"] == "failed"
