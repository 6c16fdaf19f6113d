"""Integration tests for roles."""

from fastapi import status
from fastapi.testclient import TestClient


class TestRoles:
    def test_role_crud(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/roles", json={"name": "cashier", "description": "Front desk"}
        )
        assert response.status_code == status.HTTP_201_CREATED
        role = response.json()["data"]
        assert role["name"] == "cashier"
        assert role["is_active"] is True

        response = client.put(f"/api/v1/roles/{role['id']}", json={"is_active": False})
        assert response.json()["data"]["is_active"] is False
        assert response.json()["data"]["description"] == "Front desk"

        response = client.get("/api/v1/roles", params={"is_active": "false"})
        assert [item["id"] for item in response.json()["data"]] == [role["id"]]

    def test_duplicate_role_name_is_a_constraint_violation(self, client: TestClient) -> None:
        client.post("/api/v1/roles", json={"name": "cashier"})

        response = client.post("/api/v1/roles", json={"name": "cashier"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        error = response.json()["errors"][0]
        assert error["field"] == "database"
        assert error["type"] == "invalid"

        # The session was rolled back and stays usable
        assert client.get("/api/v1/roles").json()["metadata"]["total_records"] == 1
