"""Integration tests for product categories, master products and products."""

from datetime import datetime

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from retailhub import models
from tests.conftest import (
    create_test_category,
    create_test_master_product,
    create_test_product,
    create_test_stock,
)


class TestProductCategories:
    """CRUD over /product-categories."""

    def test_create_category(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/product-categories", json={"name": "Snacks", "is_active": True}
        )

        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body["status"] == "success"
        assert body["message"] == "Data created successfully"
        assert body["errors"] == []
        data = body["data"]
        assert set(data) == {"id", "name", "is_active", "created_at", "updated_at"}
        assert isinstance(data["id"], int)
        assert data["name"] == "Snacks"
        assert data["is_active"] is True
        datetime.fromisoformat(data["created_at"])
        datetime.fromisoformat(data["updated_at"])

    def test_list_categories_with_pagination(
        self, client: TestClient, db_session: Session
    ) -> None:
        for index in range(23):
            create_test_category(db_session, name=f"Category {index:02d}")

        response = client.get("/api/v1/product-categories", params={"page": 3, "limit": 10})

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert [item["name"] for item in body["data"]] == [
            "Category 20",
            "Category 21",
            "Category 22",
        ]
        assert body["metadata"] == {
            "page": 3,
            "limit": 10,
            "total_records": 23,
            "total_pages": 3,
        }

    def test_empty_list_has_zero_pages(self, client: TestClient) -> None:
        response = client.get("/api/v1/product-categories")

        body = response.json()
        assert body["data"] == []
        assert body["metadata"]["total_records"] == 0
        assert body["metadata"]["total_pages"] == 0

    def test_search_is_case_insensitive(self, client: TestClient, db_session: Session) -> None:
        create_test_category(db_session, name="Snacks")
        create_test_category(db_session, name="Drinks")

        response = client.get(
            "/api/v1/product-categories", params={"search_key": "name", "search_value": "SNA"}
        )

        assert [item["name"] for item in response.json()["data"]] == ["Snacks"]

    def test_filter_by_boolean_column(self, client: TestClient, db_session: Session) -> None:
        create_test_category(db_session, name="Snacks")
        create_test_category(db_session, name="Archived", is_active=False)

        response = client.get("/api/v1/product-categories", params={"is_active": "false"})

        assert [item["name"] for item in response.json()["data"]] == ["Archived"]

    def test_filter_by_unknown_field(self, client: TestClient) -> None:
        response = client.get("/api/v1/product-categories", params={"colour": "red"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["errors"][0]["field"] == "colour"

    def test_limit_above_maximum(self, client: TestClient) -> None:
        response = client.get("/api/v1/product-categories", params={"limit": 1000})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["errors"][0]["field"] == "limit"

    def test_get_update_delete(self, client: TestClient, db_session: Session) -> None:
        category = create_test_category(db_session, name="Snacks")
        url = f"/api/v1/product-categories/{category.id}"

        response = client.get(url)
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["message"] == "Data retrieved successfully"

        response = client.put(url, json={"name": "Savory snacks"})
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["data"]["name"] == "Savory snacks"
        assert response.json()["data"]["is_active"] is True

        response = client.delete(url)
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["data"] is None
        assert response.json()["message"] == "Data deleted successfully"

        assert client.get(url).status_code == status.HTTP_404_NOT_FOUND

    def test_missing_category(self, client: TestClient) -> None:
        response = client.get("/api/v1/product-categories/999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        body = response.json()
        assert body["status"] == "failed"
        assert body["data"] is None
        assert body["errors"][0]["type"] == "not_found"

    def test_update_missing_category(self, client: TestClient) -> None:
        response = client.put("/api/v1/product-categories/999", json={"name": "X"})

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestMasterProducts:
    """Master products and their optional category."""

    def test_master_product_without_category(
        self, client: TestClient, db_session: Session
    ) -> None:
        master = create_test_master_product(db_session, name="Chips")

        response = client.get(f"/api/v1/master-products/{master.id}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        assert "category" in data
        assert data["category"] is None

    def test_master_product_with_category(
        self, client: TestClient, db_session: Session
    ) -> None:
        category = create_test_category(db_session, name="Snacks")

        response = client.post(
            "/api/v1/master-products", json={"name": "Chips", "category_id": category.id}
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()["data"]
        assert data["category_id"] == category.id
        assert data["category"] == {"id": category.id, "name": "Snacks", "is_active": True}

    def test_filter_by_category(self, client: TestClient, db_session: Session) -> None:
        category = create_test_category(db_session, name="Snacks")
        create_test_master_product(db_session, name="Chips", category_id=category.id)
        create_test_master_product(db_session, name="Loose item")

        response = client.get("/api/v1/master-products", params={"category_id": category.id})

        assert [item["name"] for item in response.json()["data"]] == ["Chips"]

    def test_unknown_category_is_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/master-products", json={"name": "Chips", "category_id": 42}
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["errors"][0]["field"] == "category_id"


class TestProducts:
    """Products, stock-in and the daily stock ledger."""

    def test_create_product(self, client: TestClient, db_session: Session) -> None:
        category = create_test_category(db_session, name="Snacks")
        master = create_test_master_product(db_session, name="Chips", category_id=category.id)

        response = client.post(
            "/api/v1/products", json={"master_product_id": master.id, "price": 5000}
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()["data"]
        assert data["name"] == "Chips"
        assert data["price"] == 5000
        assert data["category"]["name"] == "Snacks"

    def test_create_product_requires_master_product(self, client: TestClient) -> None:
        response = client.post("/api/v1/products", json={"master_product_id": 7, "price": 1})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["errors"][0]["field"] == "master_product_id"

    def test_stock_in_reports_current_stock(
        self, client: TestClient, db_session: Session
    ) -> None:
        product = create_test_product(db_session, name="Chips")
        create_test_stock(db_session, product.id, 5, "IN")
        create_test_stock(db_session, product.id, 2, "OUT")

        response = client.post(
            "/api/v1/products/in",
            json={"product_id": product.id, "quantity": 10, "unit_quantity": "pcs"},
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()["data"]
        assert data["id"] == product.id
        assert data["item_type"] == "PRODUCT"
        assert data["item_name"] == "Chips"
        assert data["quantity"] == 10
        assert data["current_stock"] == 13

        movements = db_session.query(models.ProductStock).filter_by(product_id=product.id).all()
        assert len(movements) == 3

    def test_stock_in_for_missing_product(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/products/in",
            json={"product_id": 404, "quantity": 1, "unit_quantity": "pcs"},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_stock_in_rejects_non_positive_quantity(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/products/in",
            json={"product_id": 1, "quantity": 0, "unit_quantity": "pcs"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["errors"][0]["field"] == "quantity"

    def test_daily_stock_ledger(self, client: TestClient, db_session: Session) -> None:
        product = create_test_product(db_session, name="Chips")
        create_test_stock(db_session, product.id, 10, "IN", datetime(2024, 1, 1, 8, 0, 0))
        create_test_stock(db_session, product.id, 4, "OUT", datetime(2024, 1, 1, 17, 30, 0))
        create_test_stock(db_session, product.id, 6, "IN", datetime(2024, 1, 2, 9, 0, 0))

        response = client.get("/api/v1/products/stock")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["metadata"]["total_records"] == 2
        first, second = body["data"]
        assert first["date"] == "2024-01-01"
        assert first["name"] == "Chips"
        assert first["first_stock_count"] == 0
        assert first["current_stock"] == 6
        assert first["in_times"] == "08:00:00"
        assert first["out_times"] == "17:30:00"
        assert second["first_stock_count"] == 6
        assert second["current_stock"] == 12
        assert second["out_times"] == "00:00:00"

    def test_ledger_closing_stock_matches_stock_in(
        self, client: TestClient, db_session: Session
    ) -> None:
        product = create_test_product(db_session, name="Chips")
        create_test_stock(db_session, product.id, 3, "IN", datetime(2024, 1, 1, 8, 0, 0))

        stock_in = client.post(
            "/api/v1/products/in",
            json={"product_id": product.id, "quantity": 4, "unit_quantity": "pcs"},
        ).json()["data"]
        ledger = client.get("/api/v1/products/stock").json()["data"]

        assert ledger[-1]["current_stock"] == stock_in["current_stock"] == 7

    def test_non_numeric_id(self, client: TestClient) -> None:
        response = client.get("/api/v1/products/abc")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        error = response.json()["errors"][0]
        assert error["type"] == "invalid"
        assert error["field"] == "id"
