"""PostgreSQL repository implementation for transactions."""

from datetime import datetime, timezone
from decimal import Decimal
from typing import List

import structlog
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

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
)
from finance_tracker.domain.interfaces import TransactionRepository
from finance_tracker.infrastructure.database.models import TransactionModel

logger = structlog.get_logger(__name__)


class PostgresTransactionRepository(TransactionRepository):
    """SQL-backed transaction repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, transaction: Transaction) -> OperationResult[Transaction]:
        try:
            with track_store_latency("create"):
                self._session.add(self._to_model(transaction))
                await self._session.flush()
        except SQLAlchemyError as e:
            return self._failure("create", e)

        return OperationResult.success(transaction)

    async def create_many(
        self,
        transactions: List[Transaction],
    ) -> OperationResult[List[Transaction]]:
        try:
            with track_store_latency("create_many"):
                self._session.add_all([self._to_model(t) for t in transactions])
                await self._session.flush()
        except SQLAlchemyError as e:
            return self._failure("create_many", e)

        return OperationResult.success(list(transactions))

    async def delete(self, user_id: str, transaction_id: str) -> OperationResult[bool]:
        stmt = delete(TransactionModel).where(
            TransactionModel.id == transaction_id,
            TransactionModel.user_id == user_id,
        )
        try:
            with track_store_latency("delete"):
                result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            return self._failure("delete", e)

        if result.rowcount == 0:
            record_store_failure("delete", "not_found")
            return OperationResult.failure(TransactionNotFoundException(transaction_id))

        return OperationResult.success(True)

    async def list_by_user(self, user_id: str) -> OperationResult[List[Transaction]]:
        stmt = (
            select(TransactionModel)
            .where(TransactionModel.user_id == user_id)
            .order_by(TransactionModel.date.desc(), TransactionModel.created_at.desc())
        )
        try:
            with track_store_latency("list"):
                result = await self._session.execute(stmt)
                models = result.scalars().all()
        except SQLAlchemyError as e:
            return self._failure("list", e)

        return OperationResult.success([self._to_entity(model) for model in models])

    def _failure(self, operation: str, error: Exception) -> OperationResult:
        record_store_failure(operation, "error")
        logger.error(
            "transaction_store_error",
            operation=operation,
            error=str(error),
            error_type=type(error).__name__,
        )
        return OperationResult.failure(
            TransactionStoreException(f"Database error during {operation}")
        )

    def _to_model(self, transaction: Transaction) -> TransactionModel:
        return TransactionModel(
            id=transaction.id,
            user_id=transaction.user_id,
            amount=transaction.amount,
            category=transaction.category.value,
            type=transaction.type.value,
            date=transaction.date,
            description=transaction.description,
            created_at=transaction.created_at.replace(tzinfo=timezone.utc),
        )

    def _to_entity(self, model: TransactionModel) -> Transaction:
        return Transaction(
            id=str(model.id),
            user_id=model.user_id,
            amount=Decimal(model.amount),
            category=Category(model.category),
            type=TransactionType(model.type),
            date=model.date,
            description=model.description,
            created_at=_naive_utc(model.created_at),
        )


def _naive_utc(value: datetime) -> datetime:
    """timestamptz columns come back aware under asyncpg; entities hold naive UTC."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
