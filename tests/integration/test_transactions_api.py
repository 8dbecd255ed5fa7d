"""
Integration tests for the transaction endpoints.

These tests verify:
1. Recording, listing and deleting transactions through the API
2. Request validation and identity handling
3. CSV export and sample data seeding
"""

import uuid
from datetime import date

import pytest
from httpx import AsyncClient

USER_HEADERS = {"X-User-ID": "user_test"}
OTHER_USER_HEADERS = {"X-User-ID": "user_other"}


# =============================================================================
# Create
# =============================================================================

class TestCreateTransaction:
    """Tests for POST /v1/transactions."""

    @pytest.mark.asyncio
    async def test_create_returns_201(self, client: AsyncClient, expense_body: dict):
        response = await client.post("/v1/transactions", json=expense_body, headers=USER_HEADERS)

        assert response.status_code == 201

        data = response.json()
        assert data["amount"] == 1200.0
        assert data["category"] == "Food"
        assert data["type"] == "Expense"
        assert data["date"] == "2024-01-10"
        assert data["description"] == "Groceries and dining"
        uuid.UUID(data["id"])

    @pytest.mark.asyncio
    async def test_blank_description_stored_as_null(self, client: AsyncClient, expense_body: dict):
        expense_body["description"] = "   "

        response = await client.post("/v1/transactions", json=expense_body, headers=USER_HEADERS)

        assert response.status_code == 201
        assert response.json()["description"] is None

    @pytest.mark.asyncio
    async def test_date_defaults_to_today(self, client: AsyncClient, expense_body: dict):
        del expense_body["date"]

        response = await client.post("/v1/transactions", json=expense_body, headers=USER_HEADERS)

        assert response.status_code == 201
        assert response.json()["date"] == date.today().isoformat()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field,value", [
        ("amount", "-5"),
        ("amount", "1.005"),
        ("category", "Groceries"),
        ("type", "Refund"),
        ("date", "not-a-date"),
    ])
    async def test_invalid_body_returns_422(
        self,
        client: AsyncClient,
        expense_body: dict,
        field: str,
        value: str,
    ):
        expense_body[field] = value

        response = await client.post("/v1/transactions", json=expense_body, headers=USER_HEADERS)

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_missing_user_returns_401(self, client: AsyncClient, expense_body: dict):
        response = await client.post("/v1/transactions", json=expense_body)

        assert response.status_code == 401
        assert response.json()["error"] == "AUTHENTICATION_REQUIRED"
        assert response.headers["WWW-Authenticate"] == "Bearer"


# =============================================================================
# List
# =============================================================================

class TestListTransactions:
    """Tests for GET /v1/transactions."""

    @pytest.mark.asyncio
    async def test_empty_list(self, client: AsyncClient):
        response = await client.get("/v1/transactions", headers=USER_HEADERS)

        assert response.status_code == 200
        assert response.json() == {
            "user_id": "user_test",
            "total_count": 0,
            "transactions": [],
        }

    @pytest.mark.asyncio
    async def test_list_newest_first(
        self,
        client: AsyncClient,
        expense_body: dict,
        income_body: dict,
    ):
        await client.post("/v1/transactions", json=expense_body, headers=USER_HEADERS)
        await client.post("/v1/transactions", json=income_body, headers=USER_HEADERS)

        response = await client.get("/v1/transactions", headers=USER_HEADERS)

        data = response.json()
        assert data["total_count"] == 2
        assert [t["date"] for t in data["transactions"]] == ["2024-01-15", "2024-01-10"]

    @pytest.mark.asyncio
    async def test_list_is_scoped_to_user(self, client: AsyncClient, expense_body: dict):
        await client.post("/v1/transactions", json=expense_body, headers=USER_HEADERS)

        response = await client.get("/v1/transactions", headers=OTHER_USER_HEADERS)

        assert response.json()["total_count"] == 0

    @pytest.mark.asyncio
    async def test_pagination(self, client: AsyncClient):
        await client.post("/v1/transactions/sample", headers=USER_HEADERS)

        response = await client.get(
            "/v1/transactions",
            params={"limit": 3, "offset": 5},
            headers=USER_HEADERS,
        )

        data = response.json()
        assert data["total_count"] == 7
        assert len(data["transactions"]) == 2

    @pytest.mark.asyncio
    async def test_limit_out_of_range_returns_422(self, client: AsyncClient):
        response = await client.get(
            "/v1/transactions",
            params={"limit": 0},
            headers=USER_HEADERS,
        )

        assert response.status_code == 422


# =============================================================================
# Delete
# =============================================================================

class TestDeleteTransaction:
    """Tests for DELETE /v1/transactions/{id}."""

    @pytest.mark.asyncio
    async def test_delete_returns_204(self, client: AsyncClient, expense_body: dict):
        created = await client.post("/v1/transactions", json=expense_body, headers=USER_HEADERS)
        transaction_id = created.json()["id"]

        response = await client.delete(f"/v1/transactions/{transaction_id}", headers=USER_HEADERS)

        assert response.status_code == 204

        listing = await client.get("/v1/transactions", headers=USER_HEADERS)
        assert listing.json()["total_count"] == 0

    @pytest.mark.asyncio
    async def test_delete_unknown_returns_404(self, client: AsyncClient):
        response = await client.delete(f"/v1/transactions/{uuid.uuid4()}", headers=USER_HEADERS)

        assert response.status_code == 404
        assert response.json()["error"] == "TRANSACTION_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_cannot_delete_other_users_transaction(
        self,
        client: AsyncClient,
        expense_body: dict,
    ):
        created = await client.post("/v1/transactions", json=expense_body, headers=USER_HEADERS)
        transaction_id = created.json()["id"]

        response = await client.delete(
            f"/v1/transactions/{transaction_id}",
            headers=OTHER_USER_HEADERS,
        )

        assert response.status_code == 404

        listing = await client.get("/v1/transactions", headers=USER_HEADERS)
        assert listing.json()["total_count"] == 1

    @pytest.mark.asyncio
    async def test_malformed_id_returns_422(self, client: AsyncClient):
        response = await client.delete("/v1/transactions/not-a-uuid", headers=USER_HEADERS)

        assert response.status_code == 422


# =============================================================================
# Export & Samples
# =============================================================================

class TestExport:
    """Tests for GET /v1/transactions/export."""

    @pytest.mark.asyncio
    async def test_export_csv(self, client: AsyncClient):
        await client.post("/v1/transactions/sample", headers=USER_HEADERS)

        response = await client.get("/v1/transactions/export", headers=USER_HEADERS)

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert 'filename="transactions-' in response.headers["content-disposition"]

        lines = response.text.split("\n")
        assert len(lines) == 8
        assert lines[0] == "Date,Type,Category,Amount,Description"
        assert lines[1] == '"2024-01-15","Income","Salary","3500.00","Monthly salary"'

    @pytest.mark.asyncio
    async def test_export_without_transactions_returns_400(self, client: AsyncClient):
        response = await client.get("/v1/transactions/export", headers=USER_HEADERS)

        assert response.status_code == 400
        assert response.json()["error"] == "NO_TRANSACTIONS"


class TestSampleData:
    """Tests for POST /v1/transactions/sample."""

    @pytest.mark.asyncio
    async def test_sample_inserts_seven_transactions(self, client: AsyncClient):
        response = await client.post("/v1/transactions/sample", headers=USER_HEADERS)

        assert response.status_code == 201
        assert len(response.json()) == 7

        listing = await client.get("/v1/transactions", headers=USER_HEADERS)
        assert listing.json()["total_count"] == 7


class TestHealth:

    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient):
        response = await client.get("/v1/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
