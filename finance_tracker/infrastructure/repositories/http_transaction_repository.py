"""HTTP implementation of TransactionRepository for a hosted REST backend."""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, List

import httpx
import structlog

from finance_tracker.core.config import settings
from finance_tracker.core.metrics import record_store_failure, track_store_latency
from finance_tracker.domain.entities import (
    Category,
    OperationResult,
    Transaction,
    TransactionType,
)
from finance_tracker.domain.exceptions import (
    TransactionNotFoundException,
    TransactionStoreException,
    TransactionStoreTimeoutException,
)
from finance_tracker.domain.interfaces import TransactionRepository

logger = structlog.get_logger(__name__)


class HttpTransactionRepository(TransactionRepository):
    """
    Transaction repository backed by a PostgREST-style HTTP API.

    Rows live in a hosted table; filtering and ordering are expressed as
    query parameters (``user_id=eq.<id>``, ``order=date.desc``).
    """

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        table: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = (base_url or settings.backend_api_url).rstrip("/")
        self._api_key = api_key if api_key is not None else settings.backend_api_key
        self._table = table or settings.backend_table
        self._timeout = timeout or settings.backend_api_timeout
        self._transport = transport

    @property
    def _url(self) -> str:
        return f"{self._base_url}/rest/v1/{self._table}"

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Prefer": "return=representation",
        }
        if self._api_key:
            headers["apikey"] = self._api_key
            headers["Authorization"] = f"Bearer {self._api_key}"
        return headers

    async def create(self, transaction: Transaction) -> OperationResult[Transaction]:
        result = await self.create_many([transaction])
        if not result.ok:
            return OperationResult.failure(result.error)
        return OperationResult.success(result.value[0])

    async def create_many(
        self,
        transactions: List[Transaction],
    ) -> OperationResult[List[Transaction]]:
        payload = [self._to_row(t) for t in transactions]
        response = await self._request("create_many", "POST", json=payload)
        if isinstance(response, OperationResult):
            return response

        return OperationResult.success([self._to_entity(row) for row in response.json()])

    async def delete(self, user_id: str, transaction_id: str) -> OperationResult[bool]:
        params = {"id": f"eq.{transaction_id}", "user_id": f"eq.{user_id}"}
        response = await self._request("delete", "DELETE", params=params)
        if isinstance(response, OperationResult):
            return response

        if not response.json():
            record_store_failure("delete", "not_found")
            return OperationResult.failure(TransactionNotFoundException(transaction_id))

        return OperationResult.success(True)

    async def list_by_user(self, user_id: str) -> OperationResult[List[Transaction]]:
        params = {
            "select": "*",
            "user_id": f"eq.{user_id}",
            "order": "date.desc,created_at.desc",
        }
        response = await self._request("list", "GET", params=params)
        if isinstance(response, OperationResult):
            return response

        return OperationResult.success([self._to_entity(row) for row in response.json()])

    async def _request(self, operation: str, method: str, **kwargs) -> httpx.Response | OperationResult:
        """Issue one request; failures come back as a failed OperationResult."""
        try:
            with track_store_latency(operation):
                async with httpx.AsyncClient(
                    timeout=self._timeout,
                    transport=self._transport,
                ) as client:
                    response = await client.request(
                        method,
                        self._url,
                        headers=self._headers(),
                        **kwargs,
                    )
        except httpx.TimeoutException:
            record_store_failure(operation, "timeout")
            logger.warning("transaction_store_timeout", operation=operation)
            return OperationResult.failure(TransactionStoreTimeoutException())
        except httpx.HTTPError as e:
            record_store_failure(operation, "error")
            logger.error("transaction_store_error", operation=operation, error=str(e))
            return OperationResult.failure(
                TransactionStoreException(f"Transaction store unreachable: {e}")
            )

        if response.status_code >= 400:
            record_store_failure(operation, "error")
            logger.error(
                "transaction_store_error",
                operation=operation,
                status_code=response.status_code,
            )
            return OperationResult.failure(
                TransactionStoreException(
                    message=f"Transaction store error: {response.text}",
                    status_code=response.status_code,
                )
            )

        return response

    def _to_row(self, transaction: Transaction) -> Dict[str, Any]:
        return {
            "id": transaction.id,
            "user_id": transaction.user_id,
            "amount": str(transaction.amount),
            "category": transaction.category.value,
            "type": transaction.type.value,
            "date": transaction.date.isoformat(),
            "description": transaction.description,
            "created_at": transaction.created_at.isoformat(),
        }

    def _to_entity(self, row: Dict[str, Any]) -> Transaction:
        """Parse a backend row into a Transaction entity."""
        created_at = row.get("created_at")
        if created_at:
            created = datetime.fromisoformat(created_at.replace("Z", "+00:00"))
            # Entities carry naive UTC timestamps
            if created.tzinfo is not None:
                created = created.astimezone(timezone.utc).replace(tzinfo=None)
        else:
            created = datetime.utcnow()

        date_str = row["date"]
        if "T" in date_str:
            txn_date = datetime.fromisoformat(date_str.replace("Z", "+00:00")).date()
        else:
            txn_date = datetime.strptime(date_str, "%Y-%m-%d").date()

        return Transaction(
            id=str(row["id"]),
            user_id=row["user_id"],
            amount=Decimal(str(row["amount"])),
            category=Category(row["category"]),
            type=TransactionType(row["type"]),
            date=txn_date,
            description=row.get("description"),
            created_at=created,
        )
